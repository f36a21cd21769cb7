# task_manager_api/db/models.py

from __future__ import annotations

import enum
import uuid
from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import (
    Date,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class TaskStatus(str, enum.Enum):
    TODO = "to-do"
    IN_PROGRESS = "in-progress"
    DONE = "done"
    CANCELLED = "cancelled"


# ---------------------------------------------------------------------------
# Team members
# ---------------------------------------------------------------------------


class TeamMember(TimestampMixin, Base):
    """
    A person assignable to projects and tasks.

    ``email`` is stored lowercased; the unique constraint on it is what
    ultimately guarantees uniqueness under concurrent writes.
    """

    __tablename__ = "team_members"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    designation: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<TeamMember id={self.id!r} email={self.email!r}>"


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


class ProjectMember(Base):
    """Ordered link between a project and one of its team members."""

    __tablename__ = "project_members"

    project_id: Mapped[str] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        primary_key=True,
    )
    team_member_id: Mapped[str] = mapped_column(
        ForeignKey("team_members.id"),
        primary_key=True,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    team_member: Mapped[TeamMember] = relationship("TeamMember", lazy="joined")


class Project(TimestampMixin, Base):
    """
    A named unit of work with assigned team members.

    ``name_key`` is the lowercased name and carries the unique constraint,
    which makes the name unique case-insensitively.
    """

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    name_key: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    memberships: Mapped[List[ProjectMember]] = relationship(
        "ProjectMember",
        order_by="ProjectMember.position",
        cascade="all, delete-orphan",
    )

    @property
    def team_members(self) -> List[TeamMember]:
        return [m.team_member for m in self.memberships]

    @property
    def team_member_ids(self) -> List[str]:
        return [m.team_member_id for m in self.memberships]

    def __repr__(self) -> str:
        return f"<Project id={self.id!r} name={self.name!r}>"


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


class TaskAssignee(Base):
    """Ordered link between a task and an assigned team member."""

    __tablename__ = "task_assignees"

    task_id: Mapped[str] = mapped_column(
        ForeignKey("tasks.id", ondelete="CASCADE"),
        primary_key=True,
    )
    team_member_id: Mapped[str] = mapped_column(
        ForeignKey("team_members.id"),
        primary_key=True,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    team_member: Mapped[TeamMember] = relationship("TeamMember", lazy="joined")


class Task(TimestampMixin, Base):
    """
    A unit of work belonging to one project, assigned to one or more
    team members and tracked through ``TaskStatus``.
    """

    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    title_key: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # description.lower(), kept in sync by TasksRepository
    description_key: Mapped[str] = mapped_column(Text, nullable=False, default="")
    deadline: Mapped[date] = mapped_column(Date, nullable=False, index=True)

    project_id: Mapped[str] = mapped_column(
        ForeignKey("projects.id"),
        nullable=False,
        index=True,
    )

    status: Mapped[TaskStatus] = mapped_column(
        SQLEnum(
            TaskStatus,
            name="task_status_enum",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=TaskStatus.TODO,
        index=True,
    )

    project: Mapped[Optional[Project]] = relationship("Project", lazy="joined")

    assignments: Mapped[List[TaskAssignee]] = relationship(
        "TaskAssignee",
        order_by="TaskAssignee.position",
        cascade="all, delete-orphan",
    )

    @property
    def assigned_members(self) -> List[TeamMember]:
        return [a.team_member for a in self.assignments]

    @property
    def assigned_member_ids(self) -> List[str]:
        return [a.team_member_id for a in self.assignments]

    def __repr__(self) -> str:
        return f"<Task id={self.id!r} title={self.title!r} status={self.status.value!r}>"


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class User(TimestampMixin, Base):
    """
    An account that can sign in to the API. Unrelated to ``TeamMember``.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id!r} email={self.email!r}>"
