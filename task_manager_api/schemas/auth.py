# task_manager_api/schemas/auth.py

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import APIModel, Email, NonEmptyStr

MIN_PASSWORD_LENGTH = 6


class SignupRequest(APIModel):
    name: NonEmptyStr
    email: Email
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)


class LoginRequest(APIModel):
    email: Email
    password: str = Field(..., min_length=1)


class UserPublic(APIModel):
    id: str
    name: str
    email: str


class UserRead(UserPublic):
    created_at: datetime
    updated_at: datetime


class AuthResponse(APIModel):
    token: str
    user: UserPublic


__all__ = [
    "MIN_PASSWORD_LENGTH",
    "SignupRequest",
    "LoginRequest",
    "UserPublic",
    "UserRead",
    "AuthResponse",
]
