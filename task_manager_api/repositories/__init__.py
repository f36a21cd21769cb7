# task_manager_api/repositories/__init__.py
"""
Repository layer public exports.

This package groups the concrete repositories used by the HTTP API.
Downstream code can import from this module instead of individual files, e.g.:

    from task_manager_api.repositories import TasksRepository
"""

from .base import PageResult, paginate
from .projects import ProjectsRepository
from .tasks import TasksRepository, build_task_conditions
from .team_members import TeamMembersRepository
from .users import UsersRepository

__all__ = [
    "PageResult",
    "paginate",
    "ProjectsRepository",
    "TasksRepository",
    "build_task_conditions",
    "TeamMembersRepository",
    "UsersRepository",
]
