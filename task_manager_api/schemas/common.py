# task_manager_api/schemas/common.py

from __future__ import annotations

import math
import uuid
from datetime import date, datetime
from typing import Annotated, Any, Generic, List, Optional, Sequence, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    conlist,
)
from pydantic.alias_generators import to_camel

from task_manager_api.exceptions import InvalidInputError


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base Pydantic model for all HTTP API schemas.

    Common config:
    - camelCase on the wire (``teamMembers``, ``createdAt``), snake_case in Python
    - snake_case input is accepted too
    - models can be built straight from ORM objects
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Field parsers
# ---------------------------------------------------------------------------


def normalize_id(value: Any) -> str:
    """
    Return the canonical form of a record id, or raise ``ValueError``.

    Ids are UUIDs; any spelling ``uuid.UUID`` accepts (upper case, no dashes,
    braces) is normalized to the lowercase dashed form stored in the database.
    """
    if isinstance(value, uuid.UUID):
        return str(value)
    if not isinstance(value, str):
        raise ValueError("Invalid ID format")
    try:
        return str(uuid.UUID(value.strip()))
    except ValueError:
        raise ValueError("Invalid ID format") from None


def parse_id(value: str, field: str = "id") -> str:
    """
    Path/query variant of ``normalize_id`` raising ``InvalidInputError``.
    """
    try:
        return normalize_id(value)
    except ValueError as exc:
        raise InvalidInputError.for_field(field, str(exc)) from None


def parse_date(value: Any) -> date:
    """
    Accept ``YYYY-MM-DD`` or a full ISO-8601 datetime (its date part is kept).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        raw = value.strip()
        try:
            return date.fromisoformat(raw)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    raise ValueError("Invalid date format")


def parse_optional_date(value: Optional[str], field: str) -> Optional[date]:
    if value is None or value == "":
        return None
    try:
        return parse_date(value)
    except ValueError as exc:
        raise InvalidInputError.for_field(field, str(exc)) from None


def dedupe_ids(ids: Sequence[str]) -> List[str]:
    """Drop repeated ids, keeping the first occurrence order."""
    seen: dict[str, None] = {}
    for item in ids:
        seen.setdefault(item, None)
    return list(seen)


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _lower(value: str) -> str:
    return value.lower()


NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

RecordId = Annotated[str, BeforeValidator(normalize_id)]

IdList = Annotated[conlist(RecordId, min_length=1), AfterValidator(dedupe_ids)]

Email = Annotated[EmailStr, BeforeValidator(_strip), AfterValidator(_lower)]

DateValue = Annotated[date, BeforeValidator(parse_date)]


# ---------------------------------------------------------------------------
# Pagination envelope
# ---------------------------------------------------------------------------


T = TypeVar("T")


def total_pages(total_count: int, limit: int) -> int:
    if limit <= 0:
        return 0
    return math.ceil(total_count / limit)


class Page(APIModel, Generic[T]):
    """
    ``{data, totalCount, totalPages, currentPage}`` envelope shared by every
    list endpoint.
    """

    data: List[T] = Field(default_factory=list)
    total_count: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    current_page: int = Field(..., ge=1)


# ---------------------------------------------------------------------------
# Simple responses
# ---------------------------------------------------------------------------


class MessageResponse(APIModel):
    message: str


class FieldError(APIModel):
    field: str
    message: str


class ErrorResponse(APIModel):
    """
    Standard error envelope for all endpoints.
    """

    message: str
    errors: Optional[List[FieldError]] = None
    error: Optional[str] = Field(
        default=None,
        description="Underlying cause; only set on 500 responses.",
    )


__all__ = [
    "APIModel",
    "DateValue",
    "Email",
    "ErrorResponse",
    "FieldError",
    "IdList",
    "MessageResponse",
    "NonEmptyStr",
    "RecordId",
    "Page",
    "dedupe_ids",
    "normalize_id",
    "parse_date",
    "parse_id",
    "parse_optional_date",
    "total_pages",
]
