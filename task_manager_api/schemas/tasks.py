"""
task_manager_api/schemas/tasks.py

Pydantic models for the "tasks" HTTP API, plus ``TaskFilters``, the
normalized form of the task listing query string.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from task_manager_api.db.models import TaskStatus

from .common import APIModel, DateValue, IdList, NonEmptyStr, RecordId
from .projects import ProjectSummary
from .teams import TeamMemberSummary


class TaskCreate(APIModel):
    title: NonEmptyStr = Field(..., description="Task title, unique case-insensitively")
    description: NonEmptyStr
    deadline: DateValue = Field(
        ...,
        description="Due date (YYYY-MM-DD, or an ISO-8601 datetime whose date part is used).",
    )
    project: RecordId = Field(..., description="Id of the owning project")
    assigned_members: IdList = Field(
        ...,
        description="Ids of the assigned team members (at least one).",
    )
    status: TaskStatus = TaskStatus.TODO


class TaskUpdate(APIModel):
    """
    Partial update payload; omitted fields are left untouched.
    """

    title: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None
    deadline: Optional[DateValue] = None
    project: Optional[RecordId] = None
    assigned_members: Optional[IdList] = None
    status: Optional[TaskStatus] = None


class TaskRead(APIModel):
    id: str
    title: str
    description: str
    deadline: date
    project: Optional[ProjectSummary] = None
    assigned_members: List[TeamMemberSummary] = Field(default_factory=list)
    status: TaskStatus
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TaskFilters:
    """
    Task listing filters. Every field that is set narrows the result (AND).
    """

    project_id: Optional[str] = None
    member_id: Optional[str] = None
    status: Optional[TaskStatus] = None
    search: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


__all__ = [
    "TaskCreate",
    "TaskUpdate",
    "TaskRead",
    "TaskFilters",
]
