# task_manager_api/repositories/team_members.py

from __future__ import annotations

from typing import Any, Iterable, Optional

from sqlalchemy import Select, exists, func, select
from sqlalchemy.orm import Session

from ..db import models
from .base import PageResult, paginate


class TeamMembersRepository:
    """
    Thin data-access layer around the TeamMember model.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return select(models.TeamMember)

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list_page(self, *, page: int, limit: int) -> PageResult[models.TeamMember]:
        """
        Return one page of team members, newest first.
        """
        stmt = self._base_select().order_by(
            models.TeamMember.created_at.desc(),
            models.TeamMember.id.desc(),
        )
        return paginate(self.session, stmt, page=page, limit=limit)

    def get_by_id(self, member_id: str) -> Optional[models.TeamMember]:
        return self.session.get(models.TeamMember, member_id)

    def get_by_email(
        self,
        email: str,
        *,
        exclude_id: Optional[str] = None,
    ) -> Optional[models.TeamMember]:
        """
        Fetch the member owning ``email`` (already lowercased), optionally
        ignoring the record being updated.
        """
        stmt = self._base_select().where(models.TeamMember.email == email)
        if exclude_id is not None:
            stmt = stmt.where(models.TeamMember.id != exclude_id)
        return self.session.execute(stmt).scalars().first()

    def count_existing(self, member_ids: Iterable[str]) -> int:
        """
        Count how many of ``member_ids`` belong to stored team members.
        """
        ids = list(member_ids)
        if not ids:
            return 0
        stmt = select(func.count()).select_from(models.TeamMember).where(
            models.TeamMember.id.in_(ids)
        )
        return int(self.session.execute(stmt).scalar_one())

    def is_referenced(self, member_id: str) -> bool:
        """
        True if any project or task still points at this member.
        """
        in_project = exists().where(models.ProjectMember.team_member_id == member_id)
        in_task = exists().where(models.TaskAssignee.team_member_id == member_id)
        stmt = select(in_project | in_task)
        return bool(self.session.execute(stmt).scalar())

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(self, *, name: str, email: str, designation: str) -> models.TeamMember:
        member = models.TeamMember(name=name, email=email, designation=designation)
        self.session.add(member)
        self.session.flush()
        return member

    def update_fields(self, member: models.TeamMember, fields: dict[str, Any]) -> models.TeamMember:
        for key, value in fields.items():
            setattr(member, key, value)
        self.session.add(member)
        self.session.flush()
        return member

    def delete(self, member: models.TeamMember) -> None:
        self.session.delete(member)
        self.session.flush()


__all__ = ["TeamMembersRepository"]
