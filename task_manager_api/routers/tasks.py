# task_manager_api/routers/tasks.py

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from task_manager_api.db.models import TaskStatus
from task_manager_api.dependencies import (
    PageParams,
    get_page_params,
    get_tasks_service,
    require_user,
)
from task_manager_api.schemas.common import MessageResponse, Page, parse_id, parse_optional_date
from task_manager_api.schemas.tasks import TaskCreate, TaskFilters, TaskRead, TaskUpdate
from task_manager_api.services import TasksService

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    dependencies=[Depends(require_user)],
)


def get_task_filters(
    project: Optional[str] = Query(None, description="Only tasks of this project."),
    member: Optional[str] = Query(None, description="Only tasks assigned to this team member."),
    task_status: Optional[TaskStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(
        None,
        description="Case-insensitive substring of the title or the description.",
    ),
    start_date: Optional[str] = Query(None, alias="startDate", description="Earliest deadline (inclusive)."),
    end_date: Optional[str] = Query(None, alias="endDate", description="Latest deadline (inclusive)."),
) -> TaskFilters:
    return TaskFilters(
        project_id=parse_id(project, "project") if project else None,
        member_id=parse_id(member, "member") if member else None,
        status=task_status,
        search=search or None,
        start_date=parse_optional_date(start_date, "startDate"),
        end_date=parse_optional_date(end_date, "endDate"),
    )


@router.get(
    "",
    response_model=Page[TaskRead],
    summary="List tasks",
    description=(
        "Paginated tasks, newest first. All provided filters must match (AND)."
    ),
)
def list_tasks(
    *,
    paging: PageParams = Depends(get_page_params),
    filters: TaskFilters = Depends(get_task_filters),
    service: TasksService = Depends(get_tasks_service),
) -> Page:
    return service.list_tasks(filters, page=paging.page, limit=paging.limit)


@router.get("/{task_id}", response_model=TaskRead, summary="Get a single task")
def get_task(
    *,
    task_id: str,
    service: TasksService = Depends(get_tasks_service),
) -> TaskRead:
    return service.get_task(parse_id(task_id))


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    description=(
        "The title must be unique (case-insensitive), the project must exist "
        "and every id in `assignedMembers` must belong to a team member."
    ),
)
def create_task(
    *,
    payload: TaskCreate,
    service: TasksService = Depends(get_tasks_service),
) -> TaskRead:
    return service.create_task(payload)


@router.put("/{task_id}", response_model=TaskRead, summary="Update a task")
def update_task(
    *,
    task_id: str,
    payload: TaskUpdate,
    service: TasksService = Depends(get_tasks_service),
) -> TaskRead:
    return service.update_task(parse_id(task_id), payload)


@router.delete("/{task_id}", response_model=MessageResponse, summary="Delete a task")
def delete_task(
    *,
    task_id: str,
    service: TasksService = Depends(get_tasks_service),
) -> MessageResponse:
    service.delete_task(parse_id(task_id))
    return MessageResponse(message="Task deleted successfully")
