# task_manager_api/routers/teams.py

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from task_manager_api.dependencies import (
    PageParams,
    get_page_params,
    get_team_service,
    require_user,
)
from task_manager_api.schemas.common import MessageResponse, Page, parse_id
from task_manager_api.schemas.teams import TeamMemberCreate, TeamMemberRead, TeamMemberUpdate
from task_manager_api.services import TeamService

router = APIRouter(
    prefix="/teams",
    tags=["teams"],
    dependencies=[Depends(require_user)],
)


@router.get(
    "",
    response_model=Page[TeamMemberRead],
    summary="List team members",
    description="Paginated team members, newest first.",
)
def list_team_members(
    *,
    paging: PageParams = Depends(get_page_params),
    service: TeamService = Depends(get_team_service),
) -> Page:
    return service.list_members(page=paging.page, limit=paging.limit)


@router.get(
    "/{member_id}",
    response_model=TeamMemberRead,
    summary="Get a single team member",
)
def get_team_member(
    *,
    member_id: str,
    service: TeamService = Depends(get_team_service),
) -> TeamMemberRead:
    return service.get_member(parse_id(member_id))


@router.post(
    "",
    response_model=TeamMemberRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a team member",
    description="Fails with 400 if the email is already in use.",
)
def create_team_member(
    *,
    payload: TeamMemberCreate,
    service: TeamService = Depends(get_team_service),
) -> TeamMemberRead:
    return service.create_member(payload)


@router.put(
    "/{member_id}",
    response_model=TeamMemberRead,
    summary="Update a team member",
    description="Patch any subset of name, email and designation.",
)
def update_team_member(
    *,
    member_id: str,
    payload: TeamMemberUpdate,
    service: TeamService = Depends(get_team_service),
) -> TeamMemberRead:
    return service.update_member(parse_id(member_id), payload)


@router.delete(
    "/{member_id}",
    response_model=MessageResponse,
    summary="Delete a team member",
    description="Refused while the member is assigned to a project or task.",
)
def delete_team_member(
    *,
    member_id: str,
    service: TeamService = Depends(get_team_service),
) -> MessageResponse:
    service.delete_member(parse_id(member_id))
    return MessageResponse(message="Team member deleted successfully")
