"""
task_manager_api.services
-------------------------

Service layer aggregation for the Task Manager HTTP API.

Routers and other callers should import service classes from this package
instead of depending directly on repositories.

Example:

    from task_manager_api.services import ProjectsService, TasksService
"""

from .auth_service import AuthService
from .integrity import IntegrityChecker
from .projects_service import ProjectsService
from .tasks_service import TasksService
from .team_service import TeamService

__all__ = [
    "AuthService",
    "IntegrityChecker",
    "ProjectsService",
    "TasksService",
    "TeamService",
]
