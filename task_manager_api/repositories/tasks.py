# task_manager_api/repositories/tasks.py

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from sqlalchemy import ColumnElement, Select, or_, select
from sqlalchemy.orm import Session, selectinload

from ..db import models
from ..schemas.tasks import TaskFilters
from .base import PageResult, paginate


def build_task_conditions(filters: TaskFilters) -> List[ColumnElement[bool]]:
    """
    Translate ``filters`` into WHERE clauses; the caller ANDs them together.

    - ``project_id`` / ``status``: equality
    - ``member_id``: the member is among the task's assignees
    - ``search``: case-insensitive substring of title OR description, matched
      against the Python-lowercased ``title_key`` and ``description_key``
    - ``start_date`` / ``end_date``: inclusive bounds on the deadline
    """
    conditions: List[ColumnElement[bool]] = []

    if filters.project_id:
        conditions.append(models.Task.project_id == filters.project_id)

    if filters.member_id:
        conditions.append(
            models.Task.assignments.any(
                models.TaskAssignee.team_member_id == filters.member_id
            )
        )

    if filters.status is not None:
        conditions.append(models.Task.status == filters.status)

    if filters.search:
        needle = filters.search.lower()
        conditions.append(
            or_(
                models.Task.title_key.contains(needle, autoescape=True),
                models.Task.description_key.contains(needle, autoescape=True),
            )
        )

    if filters.start_date is not None:
        conditions.append(models.Task.deadline >= filters.start_date)

    if filters.end_date is not None:
        conditions.append(models.Task.deadline <= filters.end_date)

    return conditions


def _sync_description_key(task: models.Task) -> None:
    task.description_key = task.description.lower()


class TasksRepository:
    """
    Thin data-access layer around the Task model and its ordered
    assignee links.
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
        return select(models.Task).options(selectinload(models.Task.assignments))

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list_page(
        self,
        filters: TaskFilters,
        *,
        page: int,
        limit: int,
    ) -> PageResult[models.Task]:
        """
        Return one page of tasks matching every filter, newest first.
        """
        stmt = self._base_select()
        conditions = build_task_conditions(filters)
        if conditions:
            stmt = stmt.where(*conditions)
        stmt = stmt.order_by(models.Task.created_at.desc(), models.Task.id.desc())
        return paginate(self.session, stmt, page=page, limit=limit)

    def get_by_id(self, task_id: str) -> Optional[models.Task]:
        stmt = self._base_select().where(models.Task.id == task_id)
        return self.session.execute(stmt).scalars().first()

    def get_by_title_key(
        self,
        title_key: str,
        *,
        exclude_id: Optional[str] = None,
    ) -> Optional[models.Task]:
        """
        Case-insensitive exact title lookup through the normalized column.
        """
        stmt = select(models.Task).where(models.Task.title_key == title_key)
        if exclude_id is not None:
            stmt = stmt.where(models.Task.id != exclude_id)
        return self.session.execute(stmt).scalars().first()

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(
        self,
        *,
        fields: dict[str, Any],
        member_ids: Sequence[str],
    ) -> models.Task:
        task = models.Task(**fields)
        _sync_description_key(task)
        self._set_assignees(task, member_ids)
        self.session.add(task)
        self.session.flush()
        return task

    def update_fields(
        self,
        task: models.Task,
        fields: dict[str, Any],
        *,
        member_ids: Optional[Sequence[str]] = None,
    ) -> models.Task:
        for key, value in fields.items():
            setattr(task, key, value)
        _sync_description_key(task)
        if member_ids is not None:
            self._set_assignees(task, member_ids)
        task.updated_at = models.utcnow()
        self.session.add(task)
        self.session.flush()
        return task

    def delete(self, task: models.Task) -> None:
        self.session.delete(task)
        self.session.flush()

    def _set_assignees(self, task: models.Task, member_ids: Sequence[str]) -> None:
        task.assignments.clear()
        if task.id is not None:
            self.session.flush()
        for position, member_id in enumerate(member_ids):
            task.assignments.append(
                models.TaskAssignee(team_member_id=member_id, position=position)
            )


__all__ = ["TasksRepository", "build_task_conditions"]
