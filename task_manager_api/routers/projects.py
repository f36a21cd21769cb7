# task_manager_api/routers/projects.py

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from task_manager_api.dependencies import (
    PageParams,
    get_page_params,
    get_projects_service,
    require_user,
)
from task_manager_api.schemas.common import MessageResponse, Page, parse_id
from task_manager_api.schemas.projects import ProjectCreate, ProjectRead, ProjectUpdate
from task_manager_api.services import ProjectsService

router = APIRouter(
    prefix="/projects",
    tags=["projects"],
    dependencies=[Depends(require_user)],
)


@router.get(
    "",
    response_model=Page[ProjectRead],
    summary="List projects",
    description="Paginated projects, newest first, with their team members expanded.",
)
def list_projects(
    *,
    paging: PageParams = Depends(get_page_params),
    service: ProjectsService = Depends(get_projects_service),
) -> Page:
    return service.list_projects(page=paging.page, limit=paging.limit)


@router.get("/{project_id}", response_model=ProjectRead, summary="Get a single project")
def get_project(
    *,
    project_id: str,
    service: ProjectsService = Depends(get_projects_service),
) -> ProjectRead:
    return service.get_project(parse_id(project_id))


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
    description=(
        "The name must be unique (case-insensitive) and every id in "
        "`teamMembers` must belong to an existing team member."
    ),
)
def create_project(
    *,
    payload: ProjectCreate,
    service: ProjectsService = Depends(get_projects_service),
) -> ProjectRead:
    return service.create_project(payload)


@router.put("/{project_id}", response_model=ProjectRead, summary="Update a project")
def update_project(
    *,
    project_id: str,
    payload: ProjectUpdate,
    service: ProjectsService = Depends(get_projects_service),
) -> ProjectRead:
    return service.update_project(parse_id(project_id), payload)


@router.delete(
    "/{project_id}",
    response_model=MessageResponse,
    summary="Delete a project",
    description="Refused while tasks still belong to the project.",
)
def delete_project(
    *,
    project_id: str,
    service: ProjectsService = Depends(get_projects_service),
) -> MessageResponse:
    service.delete_project(parse_id(project_id))
    return MessageResponse(message="Project deleted successfully")
