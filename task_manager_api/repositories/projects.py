# task_manager_api/repositories/projects.py

from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy import Select, exists, select
from sqlalchemy.orm import Session, selectinload

from ..db import models
from .base import PageResult, paginate


class ProjectsRepository:
    """
    Thin data-access layer around the Project model and its ordered
    team member links.
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
        return select(models.Project).options(selectinload(models.Project.memberships))

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list_page(self, *, page: int, limit: int) -> PageResult[models.Project]:
        """
        Return one page of projects, newest first, members preloaded.
        """
        stmt = self._base_select().order_by(
            models.Project.created_at.desc(),
            models.Project.id.desc(),
        )
        return paginate(self.session, stmt, page=page, limit=limit)

    def get_by_id(self, project_id: str) -> Optional[models.Project]:
        stmt = self._base_select().where(models.Project.id == project_id)
        return self.session.execute(stmt).scalars().first()

    def exists(self, project_id: str) -> bool:
        stmt = select(exists().where(models.Project.id == project_id))
        return bool(self.session.execute(stmt).scalar())

    def get_by_name_key(
        self,
        name_key: str,
        *,
        exclude_id: Optional[str] = None,
    ) -> Optional[models.Project]:
        """
        Case-insensitive exact name lookup through the normalized column.
        """
        stmt = select(models.Project).where(models.Project.name_key == name_key)
        if exclude_id is not None:
            stmt = stmt.where(models.Project.id != exclude_id)
        return self.session.execute(stmt).scalars().first()

    def is_referenced(self, project_id: str) -> bool:
        """True if any task still belongs to this project."""
        stmt = select(exists().where(models.Task.project_id == project_id))
        return bool(self.session.execute(stmt).scalar())

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(
        self,
        *,
        name: str,
        name_key: str,
        description: str,
        member_ids: Sequence[str],
    ) -> models.Project:
        project = models.Project(name=name, name_key=name_key, description=description)
        self._set_members(project, member_ids)
        self.session.add(project)
        self.session.flush()
        return project

    def update_fields(
        self,
        project: models.Project,
        fields: dict[str, Any],
        *,
        member_ids: Optional[Sequence[str]] = None,
    ) -> models.Project:
        for key, value in fields.items():
            setattr(project, key, value)
        if member_ids is not None:
            self._set_members(project, member_ids)
        project.updated_at = models.utcnow()
        self.session.add(project)
        self.session.flush()
        return project

    def delete(self, project: models.Project) -> None:
        self.session.delete(project)
        self.session.flush()

    def _set_members(self, project: models.Project, member_ids: Sequence[str]) -> None:
        project.memberships.clear()
        if project.id is not None:
            # Old link rows must be gone before rows with the same
            # (project_id, team_member_id) key are inserted.
            self.session.flush()
        for position, member_id in enumerate(member_ids):
            project.memberships.append(
                models.ProjectMember(team_member_id=member_id, position=position)
            )


__all__ = ["ProjectsRepository"]
