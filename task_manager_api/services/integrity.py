# task_manager_api/services/integrity.py

"""
Referential integrity and uniqueness checks run before every write.

All checks are plain reads; nothing here mutates the session.
"""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy.orm import Session

from task_manager_api.exceptions import ConflictError, MissingReferenceError
from task_manager_api.repositories import (
    ProjectsRepository,
    TasksRepository,
    TeamMembersRepository,
)


def name_key(value: str) -> str:
    """Normalized form used for case-insensitive uniqueness."""
    return value.strip().lower()


class IntegrityChecker:
    def __init__(self, session: Session) -> None:
        self._members = TeamMembersRepository(session)
        self._projects = ProjectsRepository(session)
        self._tasks = TasksRepository(session)

    # ------------------------------------------------------------------
    # References
    # ------------------------------------------------------------------

    def ensure_team_members_exist(
        self,
        member_ids: Sequence[str],
        message: str = "One or more team members do not exist",
    ) -> None:
        """
        Count stored members among ``member_ids``; any shortfall means at
        least one id is unknown. ``member_ids`` must be free of duplicates.
        """
        if self._members.count_existing(member_ids) != len(member_ids):
            raise MissingReferenceError(message)

    def ensure_project_exists(self, project_id: str) -> None:
        if not self._projects.exists(project_id):
            raise MissingReferenceError("Project does not exist")

    # ------------------------------------------------------------------
    # Uniqueness
    # ------------------------------------------------------------------

    def ensure_email_free(self, email: str, *, exclude_id: Optional[str] = None) -> None:
        if self._members.get_by_email(email, exclude_id=exclude_id) is not None:
            raise ConflictError("Email already in use")

    def ensure_project_name_free(self, name: str, *, exclude_id: Optional[str] = None) -> None:
        if self._projects.get_by_name_key(name_key(name), exclude_id=exclude_id) is not None:
            if exclude_id is None:
                raise ConflictError("Project with this name already exists")
            raise ConflictError("Another project with this name already exists")

    def ensure_task_title_free(self, title: str, *, exclude_id: Optional[str] = None) -> None:
        if self._tasks.get_by_title_key(name_key(title), exclude_id=exclude_id) is not None:
            if exclude_id is None:
                raise ConflictError("Task with this title already exists")
            raise ConflictError("Another task with this title already exists")


__all__ = ["IntegrityChecker", "name_key"]
