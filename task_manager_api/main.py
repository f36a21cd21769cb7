"""
Entry point for the Task Manager HTTP API.

This module creates the FastAPI application, wires up middleware, exception
handlers and persistence, and mounts all routers under a common prefix.

Intended usage:
    uvicorn task_manager_api.main:app --host 0.0.0.0 --port 5000
"""

from __future__ import annotations

import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_manager_api import __version__
from task_manager_api.config import Settings, settings as default_settings
from task_manager_api.container import build_container
from task_manager_api.db.models import Base
from task_manager_api.db.session import build_engine, build_session_factory
from task_manager_api.exceptions import DomainError
from task_manager_api.logging import configure_logging, get_logger
from task_manager_api.routers import auth, projects, tasks, teams

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Location prefixes FastAPI puts in front of the offending field name.
_LOCATION_PARTS = {"body", "query", "path", "header", "cookie"}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _field_name(loc: Any) -> str:
    parts = [str(p) for p in loc if p not in _LOCATION_PARTS]
    if not parts:
        return str(loc[0]) if loc else "request"
    return ".".join(parts)


def validation_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    """
    Flatten FastAPI/pydantic validation errors into ``[{field, message}]``.
    """
    return [
        {"field": _field_name(err.get("loc", ())), "message": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application Lifecycle Manager.
    Creates the schema on startup (when enabled) and disposes the engine on shutdown.
    """
    cfg: Settings = app.state.settings
    logger.info(
        "app_starting",
        app_name=cfg.APP_NAME,
        env=cfg.APP_ENV.value,
        version=__version__,
        api_prefix=cfg.api_prefix,
    )

    if cfg.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=app.state.engine)

    yield

    logger.info("app_stopping")
    app.state.engine.dispose()


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.

    Every app owns its engine, session factory and DI container, so tests
    can build isolated apps from their own ``Settings``.
    """
    cfg = settings or default_settings
    configure_logging(cfg)

    app = FastAPI(
        title="Task Manager API",
        version=__version__,
        description="Team members, projects and tasks with JWT authentication.",
        openapi_url="/openapi.json" if cfg.docs_enabled else None,
        docs_url="/docs" if cfg.docs_enabled else None,
        redoc_url="/redoc" if cfg.docs_enabled else None,
        lifespan=lifespan,
    )

    engine = build_engine(cfg)
    app.state.settings = cfg
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.container = build_container(cfg)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.warning(
                "request_failed",
                method=request.method,
                path=request.url.path,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise
        duration_ms = round((time.perf_counter() - started) * 1000, 2)

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        return response

    # Global exception handlers
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Validation error", "errors": validation_errors(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Standardizes HTTP errors (unknown routes, wrong methods).
        """
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal Server Error", "error": str(exc)},
        )

    # Simple health check
    @app.get("/health", tags=["system"])
    async def health() -> dict:
        return {"status": "ok", "version": __version__}

    for module in (auth, teams, projects, tasks):
        app.include_router(module.router, prefix=cfg.api_prefix)

    return app


# Entry point for uvicorn
app = create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(
        "task_manager_api.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.APP_ENV.value == "development",
    )
