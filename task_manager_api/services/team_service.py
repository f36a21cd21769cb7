# task_manager_api/services/team_service.py

from __future__ import annotations

from sqlalchemy.orm import Session

from task_manager_api.exceptions import ConflictError, NotFoundError
from task_manager_api.logging import get_logger
from task_manager_api.repositories import TeamMembersRepository
from task_manager_api.schemas.common import Page
from task_manager_api.schemas.teams import TeamMemberCreate, TeamMemberRead, TeamMemberUpdate

from .base import build_page, commit_or_conflict
from .integrity import IntegrityChecker

logger = get_logger(__name__)

MEMBER_IN_USE = "Team member is assigned to projects or tasks and cannot be deleted"


class TeamService:
    """
    High-level service for team members.

    Responsibilities:
    - Enforce email uniqueness before writing.
    - Refuse to delete members that projects or tasks still reference.
    - Convert repository models to API schemas (`TeamMemberRead`).
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._repo = TeamMembersRepository(session)
        self._checks = IntegrityChecker(session)

    def list_members(self, *, page: int, limit: int) -> Page:
        result = self._repo.list_page(page=page, limit=limit)
        return build_page(
            [TeamMemberRead.model_validate(m) for m in result.items],
            total_count=result.total_count,
            page=page,
            limit=limit,
        )

    def get_member(self, member_id: str) -> TeamMemberRead:
        member = self._repo.get_by_id(member_id)
        if member is None:
            raise NotFoundError("Team member not found")
        return TeamMemberRead.model_validate(member)

    def create_member(self, payload: TeamMemberCreate) -> TeamMemberRead:
        self._checks.ensure_email_free(payload.email)

        with commit_or_conflict(self._session, "Email already in use"):
            member = self._repo.create(
                name=payload.name,
                email=payload.email,
                designation=payload.designation,
            )

        logger.info("team_member_created", member_id=member.id)
        return TeamMemberRead.model_validate(member)

    def update_member(self, member_id: str, payload: TeamMemberUpdate) -> TeamMemberRead:
        member = self._repo.get_by_id(member_id)
        if member is None:
            raise NotFoundError("Team member not found")

        updates = payload.model_dump(exclude_none=True)
        if "email" in updates:
            self._checks.ensure_email_free(updates["email"], exclude_id=member_id)

        if updates:
            with commit_or_conflict(self._session, "Email already in use"):
                self._repo.update_fields(member, updates)
            logger.info("team_member_updated", member_id=member_id, fields=sorted(updates))

        return TeamMemberRead.model_validate(member)

    def delete_member(self, member_id: str) -> None:
        member = self._repo.get_by_id(member_id)
        if member is None:
            raise NotFoundError("Team member not found")

        if self._repo.is_referenced(member_id):
            raise ConflictError(MEMBER_IN_USE)

        with commit_or_conflict(self._session, MEMBER_IN_USE):
            self._repo.delete(member)
        logger.info("team_member_deleted", member_id=member_id)


__all__ = ["TeamService"]
