# task_manager_api/logging/__init__.py

"""
Logging helpers for the Task Manager HTTP API.

API code does::

    from task_manager_api.logging import get_logger

    logger = get_logger(__name__)
    logger.info("project_created", project_id=project.id)

and stays decoupled from the concrete structlog setup.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog

from .config import configure_logging

DEFAULT_LOGGER_NAME = "task_manager_api"


def get_logger(name: Optional[str] = None) -> Any:
    """
    Return a structlog logger bound to ``name`` (defaults to the service name).
    """
    return structlog.get_logger(name or DEFAULT_LOGGER_NAME)


__all__ = ["DEFAULT_LOGGER_NAME", "configure_logging", "get_logger"]
