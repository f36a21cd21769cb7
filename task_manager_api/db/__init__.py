"""
task_manager_api.db
===================

Database package for the Task Manager HTTP API.

This module centralizes the public DB primitives so the rest of the
service can import them from a single place, e.g.:

    from task_manager_api.db import Base, build_engine, get_session
"""

from .models import Base, Project, ProjectMember, Task, TaskAssignee, TaskStatus, TeamMember, User
from .session import build_engine, build_session_factory, get_session, session_scope

__all__ = [
    "Base",
    "Project",
    "ProjectMember",
    "Task",
    "TaskAssignee",
    "TaskStatus",
    "TeamMember",
    "User",
    "build_engine",
    "build_session_factory",
    "get_session",
    "session_scope",
]
