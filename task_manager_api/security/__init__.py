"""
Password hashing and bearer-token helpers.
"""

from .passwords import PasswordHasher
from .tokens import TokenService, build_token_service

__all__ = ["PasswordHasher", "TokenService", "build_token_service"]
