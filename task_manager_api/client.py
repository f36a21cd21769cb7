# task_manager_api/client.py

"""
Synchronous HTTP client for the Task Manager API.

Every authenticated call takes an explicit ``RequestContext`` carrying the
bearer token, so several sessions can share one client::

    client = TaskManagerClient("http://localhost:5000")
    auth = client.login("ada@example.com", "secret123")
    ctx = RequestContext(token=auth["token"])
    page = client.list_tasks(ctx, status="in-progress", page=2)

Any ``httpx.Client`` can be injected, including FastAPI's ``TestClient``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import httpx

from task_manager_api.db.models import TaskStatus
from task_manager_api.logging import get_logger

logger = get_logger(__name__)

JSON = Dict[str, Any]


class ApiError(Exception):
    """Raised for every non-2xx response."""

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
        super().__init__(f"{status_code}: {message}")


@dataclass(frozen=True)
class RequestContext:
    token: str

    @property
    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@dataclass
class DashboardSummary:
    team_members: int
    projects: int
    total_tasks: int
    tasks_by_status: Dict[str, int] = field(default_factory=dict)
    recent_tasks: List[JSON] = field(default_factory=list)


class TaskManagerClient:
    """
    Thin wrapper over the REST endpoints; responses are returned as the
    decoded JSON (camelCase keys, as sent by the server).
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        *,
        api_prefix: str = "/api",
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ) -> None:
        self._prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
        self._owns_http = http is None
        self._http = http or httpx.Client(base_url=base_url, timeout=timeout)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "TaskManagerClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self._prefix}{path}"

    @staticmethod
    def _unwrap(response: httpx.Response) -> JSON:
        if response.is_success:
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = {}
        message = body.get("message") if isinstance(body, dict) else None
        errors = body.get("errors") if isinstance(body, dict) else None
        logger.warning(
            "api_request_failed",
            method=response.request.method,
            url=str(response.request.url),
            status_code=response.status_code,
            message=message,
        )
        raise ApiError(response.status_code, message or response.reason_phrase, errors)

    def _get(
        self,
        path: str,
        ctx: Optional[RequestContext] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> JSON:
        clean = {k: v for k, v in (params or {}).items() if v is not None}
        response = self._http.get(
            self._url(path),
            params=clean,
            headers=ctx.headers if ctx else None,
        )
        return self._unwrap(response)

    def _send(
        self,
        method: str,
        path: str,
        ctx: Optional[RequestContext] = None,
        payload: Optional[Mapping[str, Any]] = None,
    ) -> JSON:
        response = self._http.request(
            method,
            self._url(path),
            json=dict(payload) if payload is not None else None,
            headers=ctx.headers if ctx else None,
        )
        return self._unwrap(response)

    # -------------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------------

    def signup(self, name: str, email: str, password: str) -> JSON:
        return self._send("POST", "/auth/signup", payload={"name": name, "email": email, "password": password})

    def login(self, email: str, password: str) -> JSON:
        return self._send("POST", "/auth/login", payload={"email": email, "password": password})

    def me(self, ctx: RequestContext) -> JSON:
        return self._get("/auth/me", ctx)

    def logout(self, ctx: RequestContext) -> JSON:
        return self._send("POST", "/auth/logout", ctx)

    # -------------------------------------------------------------------------
    # Team members
    # -------------------------------------------------------------------------

    def list_team_members(self, ctx: RequestContext, *, page: int = 1, limit: Optional[int] = None) -> JSON:
        return self._get("/teams", ctx, {"page": page, "limit": limit})

    def get_team_member(self, ctx: RequestContext, member_id: str) -> JSON:
        return self._get(f"/teams/{member_id}", ctx)

    def create_team_member(self, ctx: RequestContext, payload: Mapping[str, Any]) -> JSON:
        return self._send("POST", "/teams", ctx, payload)

    def update_team_member(self, ctx: RequestContext, member_id: str, payload: Mapping[str, Any]) -> JSON:
        return self._send("PUT", f"/teams/{member_id}", ctx, payload)

    def delete_team_member(self, ctx: RequestContext, member_id: str) -> JSON:
        return self._send("DELETE", f"/teams/{member_id}", ctx)

    # -------------------------------------------------------------------------
    # Projects
    # -------------------------------------------------------------------------

    def list_projects(self, ctx: RequestContext, *, page: int = 1, limit: Optional[int] = None) -> JSON:
        return self._get("/projects", ctx, {"page": page, "limit": limit})

    def get_project(self, ctx: RequestContext, project_id: str) -> JSON:
        return self._get(f"/projects/{project_id}", ctx)

    def create_project(self, ctx: RequestContext, payload: Mapping[str, Any]) -> JSON:
        return self._send("POST", "/projects", ctx, payload)

    def update_project(self, ctx: RequestContext, project_id: str, payload: Mapping[str, Any]) -> JSON:
        return self._send("PUT", f"/projects/{project_id}", ctx, payload)

    def delete_project(self, ctx: RequestContext, project_id: str) -> JSON:
        return self._send("DELETE", f"/projects/{project_id}", ctx)

    # -------------------------------------------------------------------------
    # Tasks
    # -------------------------------------------------------------------------

    def list_tasks(
        self,
        ctx: RequestContext,
        *,
        page: int = 1,
        limit: Optional[int] = None,
        project: Optional[str] = None,
        member: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> JSON:
        params = {
            "page": page,
            "limit": limit,
            "project": project,
            "member": member,
            "status": status,
            "search": search,
            "startDate": start_date,
            "endDate": end_date,
        }
        return self._get("/tasks", ctx, params)

    def get_task(self, ctx: RequestContext, task_id: str) -> JSON:
        return self._get(f"/tasks/{task_id}", ctx)

    def create_task(self, ctx: RequestContext, payload: Mapping[str, Any]) -> JSON:
        return self._send("POST", "/tasks", ctx, payload)

    def update_task(self, ctx: RequestContext, task_id: str, payload: Mapping[str, Any]) -> JSON:
        return self._send("PUT", f"/tasks/{task_id}", ctx, payload)

    def delete_task(self, ctx: RequestContext, task_id: str) -> JSON:
        return self._send("DELETE", f"/tasks/{task_id}", ctx)

    # -------------------------------------------------------------------------
    # Aggregates
    # -------------------------------------------------------------------------

    def dashboard_summary(self, ctx: RequestContext, *, recent: int = 5) -> DashboardSummary:
        """
        Counts for the dashboard, read from the ``totalCount`` of
        single-row pages, plus the ``recent`` newest tasks.
        """
        team_total = self.list_team_members(ctx, limit=1)["totalCount"]
        project_total = self.list_projects(ctx, limit=1)["totalCount"]
        latest = self.list_tasks(ctx, limit=recent)

        by_status = {
            s.value: self.list_tasks(ctx, limit=1, status=s.value)["totalCount"]
            for s in TaskStatus
        }

        return DashboardSummary(
            team_members=team_total,
            projects=project_total,
            total_tasks=latest["totalCount"],
            tasks_by_status=by_status,
            recent_tasks=latest["data"],
        )


__all__ = ["ApiError", "DashboardSummary", "RequestContext", "TaskManagerClient"]
