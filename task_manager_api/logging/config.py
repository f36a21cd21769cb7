# task_manager_api/logging/config.py

"""
structlog configuration for the Task Manager HTTP API.

Call ``configure_logging`` once at process startup (``create_app`` does
this). Log lines are rendered as JSON when ``LOG_FORMAT=json`` and as
colored console output otherwise. Standard library loggers (uvicorn,
SQLAlchemy) go to stdout at the same level.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List

import structlog

from task_manager_api.config import LogFormat, Settings

_CONFIGURED = False


def _parse_level(value: str | None) -> int:
    """
    Map a string log level (e.g. 'DEBUG', 'info') to a logging constant.
    Unknown values fall back to INFO.
    """
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def build_processors(log_format: LogFormat) -> List[Any]:
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == LogFormat.JSON:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(settings: Settings, *, force: bool = False) -> None:
    """
    Configure structlog and the standard library logging module.

    Args:
        settings: application settings; ``LOG_LEVEL`` and ``LOG_FORMAT`` are read.
        force: reconfigure even if logging was already set up in this process.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    level = _parse_level(settings.LOG_LEVEL)

    structlog.configure(
        processors=build_processors(settings.LOG_FORMAT),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=force,
    )

    _CONFIGURED = True


__all__ = ["build_processors", "configure_logging"]
