# task_manager_api/services/projects_service.py

from __future__ import annotations

from sqlalchemy.orm import Session

from task_manager_api.exceptions import ConflictError, NotFoundError
from task_manager_api.logging import get_logger
from task_manager_api.repositories import ProjectsRepository
from task_manager_api.schemas.common import Page
from task_manager_api.schemas.projects import ProjectCreate, ProjectRead, ProjectUpdate

from .base import build_page, commit_or_conflict
from .integrity import IntegrityChecker, name_key

logger = get_logger(__name__)

PROJECT_IN_USE = "Project has tasks and cannot be deleted"


class ProjectsService:
    """
    High-level service for projects.

    Every write checks, in order: name uniqueness (case-insensitive,
    ignoring the project itself on update), then that all referenced team
    members exist. Nothing is written unless both pass.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._repo = ProjectsRepository(session)
        self._checks = IntegrityChecker(session)

    def list_projects(self, *, page: int, limit: int) -> Page:
        result = self._repo.list_page(page=page, limit=limit)
        return build_page(
            [ProjectRead.model_validate(p) for p in result.items],
            total_count=result.total_count,
            page=page,
            limit=limit,
        )

    def get_project(self, project_id: str) -> ProjectRead:
        project = self._repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project not found")
        return ProjectRead.model_validate(project)

    def create_project(self, payload: ProjectCreate) -> ProjectRead:
        self._checks.ensure_project_name_free(payload.name)
        self._checks.ensure_team_members_exist(payload.team_members)

        with commit_or_conflict(self._session, "Project with this name already exists"):
            project = self._repo.create(
                name=payload.name,
                name_key=name_key(payload.name),
                description=payload.description,
                member_ids=payload.team_members,
            )

        logger.info("project_created", project_id=project.id, members=len(payload.team_members))
        return self.get_project(project.id)

    def update_project(self, project_id: str, payload: ProjectUpdate) -> ProjectRead:
        project = self._repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project not found")

        updates = payload.model_dump(exclude_none=True)
        member_ids = updates.pop("team_members", None)

        if "name" in updates:
            self._checks.ensure_project_name_free(updates["name"], exclude_id=project_id)
            updates["name_key"] = name_key(updates["name"])

        if member_ids is not None:
            self._checks.ensure_team_members_exist(member_ids)

        if updates or member_ids is not None:
            with commit_or_conflict(self._session, "Another project with this name already exists"):
                self._repo.update_fields(project, updates, member_ids=member_ids)
            logger.info("project_updated", project_id=project_id)

        return self.get_project(project_id)

    def delete_project(self, project_id: str) -> None:
        project = self._repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project not found")

        if self._repo.is_referenced(project_id):
            raise ConflictError(PROJECT_IN_USE)

        with commit_or_conflict(self._session, PROJECT_IN_USE):
            self._repo.delete(project)
        logger.info("project_deleted", project_id=project_id)


__all__ = ["ProjectsService"]
