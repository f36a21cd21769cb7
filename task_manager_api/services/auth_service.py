# task_manager_api/services/auth_service.py

from __future__ import annotations

from sqlalchemy.orm import Session

from task_manager_api.exceptions import AuthenticationError, ConflictError, NotFoundError
from task_manager_api.logging import get_logger
from task_manager_api.repositories import UsersRepository
from task_manager_api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    SignupRequest,
    UserPublic,
    UserRead,
)
from task_manager_api.security import PasswordHasher, TokenService

from .base import commit_or_conflict

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """
    Signup, login and session lookup.

    Login failures never say whether the email or the password was wrong,
    and take about as long either way.
    """

    def __init__(
        self,
        session: Session,
        *,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._session = session
        self._repo = UsersRepository(session)
        self._hasher = hasher
        self._tokens = tokens

    def signup(self, payload: SignupRequest) -> AuthResponse:
        if self._repo.get_by_email(payload.email) is not None:
            raise ConflictError("Email already registered")

        password_hash = self._hasher.hash(payload.password)
        with commit_or_conflict(self._session, "Email already registered"):
            user = self._repo.create(
                name=payload.name,
                email=payload.email,
                password_hash=password_hash,
            )

        logger.info("user_signed_up", user_id=user.id)
        return AuthResponse(token=self._tokens.issue(user.id), user=UserPublic.model_validate(user))

    def login(self, payload: LoginRequest) -> AuthResponse:
        user = self._repo.get_by_email(payload.email)
        if user is None:
            self._hasher.burn(payload.password)
            logger.info("login_failed", reason="unknown_email")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not self._hasher.verify(payload.password, user.password_hash):
            logger.info("login_failed", reason="bad_password", user_id=user.id)
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("user_logged_in", user_id=user.id)
        return AuthResponse(token=self._tokens.issue(user.id), user=UserPublic.model_validate(user))

    def current_user(self, user_id: str) -> UserRead:
        user = self._repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return UserRead.model_validate(user)


__all__ = ["AuthService", "INVALID_CREDENTIALS"]
