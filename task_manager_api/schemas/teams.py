"""
task_manager_api/schemas/teams.py

Pydantic models for the "teams" HTTP API.

A team member is a person that projects and tasks can be assigned to.
Emails are normalized to lowercase before they reach the service layer.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import APIModel, Email, NonEmptyStr


class TeamMemberCreate(APIModel):
    """
    Payload for creating a new team member. Every field is required.
    """

    name: NonEmptyStr = Field(..., description="Full name")
    email: Email = Field(..., description="Unique email address")
    designation: NonEmptyStr = Field(..., description="Role or job title")


class TeamMemberUpdate(APIModel):
    """
    Partial update payload.

    All fields are optional; only provided ones are patched, and each one
    is validated by the same rule as on create.
    """

    name: Optional[NonEmptyStr] = None
    email: Optional[Email] = None
    designation: Optional[NonEmptyStr] = None


class TeamMemberSummary(APIModel):
    """
    Compact representation embedded in project and task responses.
    """

    id: str
    name: str
    email: str
    designation: str


class TeamMemberRead(TeamMemberSummary):
    created_at: datetime
    updated_at: datetime


__all__ = [
    "TeamMemberCreate",
    "TeamMemberUpdate",
    "TeamMemberSummary",
    "TeamMemberRead",
]
