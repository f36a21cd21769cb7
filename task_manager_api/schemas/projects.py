"""
task_manager_api/schemas/projects.py

Pydantic models for the "projects" HTTP API.

On input a project references its team members by id (``teamMembers``);
on output those references are expanded into ``TeamMemberSummary``
objects, in the order they were submitted.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import APIModel, IdList, NonEmptyStr
from .teams import TeamMemberSummary


class ProjectCreate(APIModel):
    name: NonEmptyStr = Field(..., description="Project name, unique case-insensitively")
    description: NonEmptyStr
    team_members: IdList = Field(
        ...,
        description="Ids of the assigned team members (at least one).",
    )


class ProjectUpdate(APIModel):
    """
    Partial update payload; omitted fields are left untouched.
    """

    name: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None
    team_members: Optional[IdList] = None


class ProjectSummary(APIModel):
    """
    Compact representation embedded in task responses.
    """

    id: str
    name: str
    description: str


class ProjectRead(ProjectSummary):
    team_members: List[TeamMemberSummary] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


__all__ = [
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectSummary",
    "ProjectRead",
]
