# task_manager_api/exceptions.py

"""
Domain-level exceptions.

Services raise these; the HTTP layer renders every ``DomainError`` as
``{"message": ..., "errors": [...]}`` with the class' ``status_code``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""

    status_code: int = 400

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        self.message = message
        self.errors = errors
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"message": self.message}
        if self.errors:
            payload["errors"] = self.errors
        return payload


# --- Validation Errors ---

class InvalidInputError(DomainError):
    """Raised when a payload, query parameter or path id fails validation."""

    def __init__(self, message: str = "Validation error", errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message, errors)

    @classmethod
    def for_field(cls, field: str, message: str) -> "InvalidInputError":
        return cls(errors=[{"field": field, "message": message}])


class MissingReferenceError(DomainError):
    """Raised when a payload references a project or team member that does not exist."""


# --- State Errors ---

class ConflictError(DomainError):
    """Raised on duplicate names, titles or emails, and on deletes blocked by references."""


class NotFoundError(DomainError):
    """Raised when the addressed record does not exist."""

    status_code = 404


# --- Auth Errors ---

class AuthenticationError(DomainError):
    """Raised on bad credentials and on missing, invalid or expired tokens."""

    status_code = 401


__all__ = [
    "DomainError",
    "InvalidInputError",
    "MissingReferenceError",
    "ConflictError",
    "NotFoundError",
    "AuthenticationError",
]
