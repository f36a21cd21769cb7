# task_manager_api/dependencies.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Query, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from task_manager_api.config import Settings
from task_manager_api.container import Container
from task_manager_api.db.session import get_session
from task_manager_api.exceptions import AuthenticationError, InvalidInputError
from task_manager_api.security import TokenService
from task_manager_api.services import AuthService, ProjectsService, TasksService, TeamService

# -----------------------------------------------------------------------------
# Application-scoped objects
# -----------------------------------------------------------------------------


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_token_service(container: Container = Depends(get_container)) -> TokenService:
    return container.token_service()


# -----------------------------------------------------------------------------
# Security: bearer token
# -----------------------------------------------------------------------------
bearer_scheme = HTTPBearer(auto_error=False)


def require_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """
    Resolve the caller from ``Authorization: Bearer <token>``.

    The user id is returned and also stored on ``request.state.user_id``
    for downstream handlers.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")

    user_id = tokens.verify(credentials.credentials)
    request.state.user_id = user_id
    return user_id


# -----------------------------------------------------------------------------
# Pagination
# -----------------------------------------------------------------------------


# Largest row offset accepted; keeps OFFSET inside a 32-bit integer.
MAX_OFFSET = 2**31 - 1


@dataclass(frozen=True)
class PageParams:
    page: int
    limit: int


def get_page_params(
    page: int = Query(1, ge=1, description="1-based page number."),
    limit: Optional[int] = Query(None, ge=1, description="Page size."),
    settings: Settings = Depends(get_settings),
) -> PageParams:
    size = limit if limit is not None else settings.DEFAULT_PAGE_SIZE
    if size > settings.MAX_PAGE_SIZE:
        raise InvalidInputError.for_field(
            "limit", f"Must be at most {settings.MAX_PAGE_SIZE}"
        )
    if (page - 1) * size > MAX_OFFSET:
        raise InvalidInputError.for_field("page", "Page is out of range")
    return PageParams(page=page, limit=size)


# -----------------------------------------------------------------------------
# Services (request-scoped)
# -----------------------------------------------------------------------------


def get_team_service(session: Session = Depends(get_session)) -> TeamService:
    return TeamService(session)


def get_projects_service(session: Session = Depends(get_session)) -> ProjectsService:
    return ProjectsService(session)


def get_tasks_service(session: Session = Depends(get_session)) -> TasksService:
    return TasksService(session)


def get_auth_service(
    session: Session = Depends(get_session),
    container: Container = Depends(get_container),
) -> AuthService:
    return AuthService(
        session,
        hasher=container.password_hasher(),
        tokens=container.token_service(),
    )


__all__ = [
    "MAX_OFFSET",
    "PageParams",
    "bearer_scheme",
    "get_auth_service",
    "get_container",
    "get_page_params",
    "get_projects_service",
    "get_settings",
    "get_tasks_service",
    "get_team_service",
    "get_token_service",
    "require_user",
]
