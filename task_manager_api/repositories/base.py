# task_manager_api/repositories/base.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, List, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

M = TypeVar("M")


@dataclass
class PageResult(Generic[M]):
    """One page of ORM rows plus the size of the whole filtered result."""

    items: List[M] = field(default_factory=list)
    total_count: int = 0


def count_rows(session: Session, stmt: Select[Any]) -> int:
    """
    Count the rows ``stmt`` would return, ignoring its ordering and paging.
    """
    count_stmt = select(func.count()).select_from(
        stmt.order_by(None).limit(None).offset(None).subquery()
    )
    return int(session.execute(count_stmt).scalar_one())


def paginate(session: Session, stmt: Select[Any], *, page: int, limit: int) -> PageResult[Any]:
    """
    Run ``stmt`` for the 1-based ``page`` of size ``limit``.
    """
    total_count = count_rows(session, stmt)
    offset = (page - 1) * limit

    rows = session.execute(stmt.offset(offset).limit(limit)).scalars().all()
    return PageResult(items=list(rows), total_count=total_count)


__all__ = ["PageResult", "count_rows", "paginate"]
