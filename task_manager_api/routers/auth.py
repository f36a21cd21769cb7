# task_manager_api/routers/auth.py

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from task_manager_api.dependencies import get_auth_service, require_user
from task_manager_api.schemas.auth import AuthResponse, LoginRequest, SignupRequest, UserRead
from task_manager_api.schemas.common import MessageResponse
from task_manager_api.services import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    description="Creates the account and returns a bearer token valid for 24 hours.",
)
def signup(
    *,
    payload: SignupRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    return service.signup(payload)


@router.post("/login", response_model=AuthResponse, summary="Log in")
def login(
    *,
    payload: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    return service.login(payload)


@router.get("/me", response_model=UserRead, summary="Current user")
def me(
    *,
    user_id: str = Depends(require_user),
    service: AuthService = Depends(get_auth_service),
) -> UserRead:
    return service.current_user(user_id)


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Log out",
    description="Stateless: the client discards its token.",
)
def logout() -> MessageResponse:
    return MessageResponse(message="User logged out")
