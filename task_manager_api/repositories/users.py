# task_manager_api/repositories/users.py

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import models


class UsersRepository:
    """
    Persistence for authentication accounts.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def get_by_id(self, user_id: str) -> Optional[models.User]:
        return self.session.get(models.User, user_id)

    def get_by_email(self, email: str) -> Optional[models.User]:
        """Lookup by lowercased email."""
        stmt = select(models.User).where(models.User.email == email.lower())
        return self.session.execute(stmt).scalars().first()

    def create(self, *, name: str, email: str, password_hash: str) -> models.User:
        user = models.User(name=name, email=email.lower(), password_hash=password_hash)
        self.session.add(user)
        self.session.flush()
        return user


__all__ = ["UsersRepository"]
