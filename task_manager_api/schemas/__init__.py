"""
Top-level export module for HTTP API schemas.
"""
from . import auth, common, projects, tasks, teams

from .common import (
    APIModel,
    ErrorResponse,
    FieldError,
    MessageResponse,
    Page,
)
from .auth import AuthResponse, LoginRequest, SignupRequest, UserPublic, UserRead
from .teams import TeamMemberCreate, TeamMemberRead, TeamMemberSummary, TeamMemberUpdate
from .projects import ProjectCreate, ProjectRead, ProjectSummary, ProjectUpdate
from .tasks import TaskCreate, TaskFilters, TaskRead, TaskUpdate

__all__ = [
    # Submodules
    "auth", "common", "projects", "tasks", "teams",

    # Common
    "APIModel", "ErrorResponse", "FieldError", "MessageResponse", "Page",

    # Auth
    "AuthResponse", "LoginRequest", "SignupRequest", "UserPublic", "UserRead",

    # Teams
    "TeamMemberCreate", "TeamMemberRead", "TeamMemberSummary", "TeamMemberUpdate",

    # Projects
    "ProjectCreate", "ProjectRead", "ProjectSummary", "ProjectUpdate",

    # Tasks
    "TaskCreate", "TaskFilters", "TaskRead", "TaskUpdate",
]
