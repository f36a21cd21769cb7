# task_manager_api/services/tasks_service.py

from __future__ import annotations

from sqlalchemy.orm import Session

from task_manager_api.exceptions import InvalidInputError, NotFoundError
from task_manager_api.logging import get_logger
from task_manager_api.repositories import TasksRepository
from task_manager_api.schemas.common import Page
from task_manager_api.schemas.tasks import TaskCreate, TaskFilters, TaskRead, TaskUpdate

from .base import build_page, commit_or_conflict
from .integrity import IntegrityChecker, name_key

logger = get_logger(__name__)

ASSIGNED_MEMBERS_MISSING = "One or more assigned members do not exist"


class TasksService:
    """
    High-level service for tasks.

    Writes are checked in order: title uniqueness, project existence,
    assigned member existence.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._repo = TasksRepository(session)
        self._checks = IntegrityChecker(session)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_tasks(self, filters: TaskFilters, *, page: int, limit: int) -> Page:
        if (
            filters.start_date is not None
            and filters.end_date is not None
            and filters.start_date > filters.end_date
        ):
            raise InvalidInputError.for_field("endDate", "End date must not be before start date")

        result = self._repo.list_page(filters, page=page, limit=limit)
        return build_page(
            [TaskRead.model_validate(t) for t in result.items],
            total_count=result.total_count,
            page=page,
            limit=limit,
        )

    def get_task(self, task_id: str) -> TaskRead:
        task = self._repo.get_by_id(task_id)
        if task is None:
            raise NotFoundError("Task not found")
        return TaskRead.model_validate(task)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create_task(self, payload: TaskCreate) -> TaskRead:
        self._checks.ensure_task_title_free(payload.title)
        self._checks.ensure_project_exists(payload.project)
        self._checks.ensure_team_members_exist(payload.assigned_members, ASSIGNED_MEMBERS_MISSING)

        with commit_or_conflict(self._session, "Task with this title already exists"):
            task = self._repo.create(
                fields={
                    "title": payload.title,
                    "title_key": name_key(payload.title),
                    "description": payload.description,
                    "deadline": payload.deadline,
                    "project_id": payload.project,
                    "status": payload.status,
                },
                member_ids=payload.assigned_members,
            )

        logger.info("task_created", task_id=task.id, project_id=payload.project)
        return self.get_task(task.id)

    def update_task(self, task_id: str, payload: TaskUpdate) -> TaskRead:
        task = self._repo.get_by_id(task_id)
        if task is None:
            raise NotFoundError("Task not found")

        updates = payload.model_dump(exclude_none=True)
        member_ids = updates.pop("assigned_members", None)

        if "title" in updates:
            self._checks.ensure_task_title_free(updates["title"], exclude_id=task_id)
            updates["title_key"] = name_key(updates["title"])

        if "project" in updates:
            self._checks.ensure_project_exists(updates["project"])
            updates["project_id"] = updates.pop("project")

        if member_ids is not None:
            self._checks.ensure_team_members_exist(member_ids, ASSIGNED_MEMBERS_MISSING)

        if updates or member_ids is not None:
            with commit_or_conflict(self._session, "Another task with this title already exists"):
                self._repo.update_fields(task, updates, member_ids=member_ids)
            # project_id may have changed under an already loaded relationship
            self._session.expire(task, ["project"])
            logger.info("task_updated", task_id=task_id)

        return self.get_task(task_id)

    def delete_task(self, task_id: str) -> None:
        task = self._repo.get_by_id(task_id)
        if task is None:
            raise NotFoundError("Task not found")

        self._repo.delete(task)
        self._session.commit()
        logger.info("task_deleted", task_id=task_id)


__all__ = ["TasksService"]
