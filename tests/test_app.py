# tests/test_app.py
from fastapi import APIRouter
from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from task_manager_api.config import AppEnv
from task_manager_api.main import create_app


def _api_routes(app) -> list[APIRoute]:
    """Return only FastAPI APIRoute objects (ignore static/docs/etc.)."""
    return [r for r in app.routes if isinstance(r, APIRoute)]


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_resource_routes_are_mounted_and_tagged(app):
    routes = _api_routes(app)
    for resource in ("teams", "projects", "tasks", "auth"):
        matching = [r for r in routes if r.path.startswith(f"/api/{resource}")]
        assert matching, f"No /api/{resource} routes registered."
        for route in matching:
            assert resource in route.tags, f"Route {route.path} is missing the '{resource}' tag."


def test_request_id_is_echoed(client):
    resp = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert resp.headers["X-Request-ID"] == "abc-123"

    generated = client.get("/health")
    assert generated.headers["X-Request-ID"]


def test_unknown_route_uses_message_envelope(client):
    resp = client.get("/api/nowhere")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


def test_malformed_json_body(client, auth_headers):
    resp = client.post(
        "/api/teams",
        content=b"{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation error"


def test_unhandled_errors_become_500(settings):
    app = create_app(settings)
    boom = APIRouter()

    @boom.get("/boom")
    def explode():
        raise RuntimeError("kaboom")

    app.include_router(boom)

    with TestClient(app, raise_server_exceptions=False) as c:
        resp = c.get("/boom")

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal Server Error", "error": "kaboom"}


class _RecordingLogger:
    def __init__(self):
        self.events = []

    def _record(self, event, **kw):
        self.events.append((event, kw))

    info = warning = error = exception = _record


def test_failed_requests_are_logged(settings, monkeypatch):
    import task_manager_api.main as main_module

    recorder = _RecordingLogger()
    monkeypatch.setattr(main_module, "logger", recorder)

    app = create_app(settings)
    boom = APIRouter()

    @boom.get("/boom")
    def explode():
        raise RuntimeError("kaboom")

    app.include_router(boom)

    with TestClient(app, raise_server_exceptions=False) as c:
        resp = c.get("/boom")

    assert resp.status_code == 500
    failed = [kw for event, kw in recorder.events if event == "request_failed"]
    assert len(failed) == 1
    assert failed[0]["path"] == "/boom"
    assert failed[0]["method"] == "GET"
    assert failed[0]["status_code"] == 500


def test_docs_hidden_in_production(settings):
    prod = settings.model_copy(update={"APP_ENV": AppEnv.PRODUCTION})
    app = create_app(prod)
    with TestClient(app) as c:
        assert c.get("/docs").status_code == 404
