# task_manager_api/services/base.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from task_manager_api.exceptions import ConflictError
from task_manager_api.logging import get_logger
from task_manager_api.schemas.common import Page, total_pages

logger = get_logger(__name__)


@contextmanager
def commit_or_conflict(session: Session, conflict_message: str) -> Iterator[None]:
    """
    Run the writes in the block, then commit.

    The application-level uniqueness checks race with concurrent writers;
    the unique constraints on the normalized columns are the final word,
    and a violation is reported exactly like a failed pre-check.
    """
    try:
        yield
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        logger.warning("integrity_conflict", message=conflict_message, error=str(exc.orig))
        raise ConflictError(conflict_message) from exc


def build_page(items: list, *, total_count: int, page: int, limit: int) -> Page:
    return Page(
        data=items,
        total_count=total_count,
        total_pages=total_pages(total_count, limit),
        current_page=page,
    )


__all__ = ["build_page", "commit_or_conflict"]
