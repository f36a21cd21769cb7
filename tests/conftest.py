# tests/conftest.py
import itertools

import pytest
from fastapi.testclient import TestClient

from task_manager_api.config import AppEnv, Settings
from task_manager_api.main import create_app

_counter = itertools.count(1)


@pytest.fixture(scope="function")
def settings():
    """Isolated in-memory database and a cheap bcrypt cost for every test."""
    return Settings(
        APP_ENV=AppEnv.TESTING,
        DATABASE_URL="sqlite://",
        JWT_SECRET="test-secret",
        BCRYPT_ROUNDS=4,
        CORS_ORIGINS="*",
    )


@pytest.fixture(scope="function")
def app(settings):
    return create_app(settings)


@pytest.fixture(scope="function")
def client(app):
    """
    Returns a FastAPI TestClient.
    Entering the context runs the lifespan, which creates the tables.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def token_service(app):
    return app.state.container.token_service()


@pytest.fixture
def auth_token(client):
    resp = client.post(
        "/api/auth/signup",
        json={"name": "Test User", "email": "tester@example.com", "password": "secret123"},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["token"]


@pytest.fixture
def auth_headers(auth_token):
    return {"Authorization": f"Bearer {auth_token}"}


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_member(client, auth_headers):
    """Create a team member through the API and return its JSON."""

    def _make(**overrides):
        n = next(_counter)
        payload = {
            "name": f"Member {n}",
            "email": f"member{n}@example.com",
            "designation": "Engineer",
        }
        payload.update(overrides)
        resp = client.post("/api/teams", json=payload, headers=auth_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture
def make_project(client, auth_headers, make_member):
    def _make(members=None, **overrides):
        n = next(_counter)
        member_ids = members or [make_member()["id"]]
        payload = {
            "name": f"Project {n}",
            "description": "A project",
            "teamMembers": member_ids,
        }
        payload.update(overrides)
        resp = client.post("/api/projects", json=payload, headers=auth_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture
def make_task(client, auth_headers, make_member, make_project):
    def _make(project=None, members=None, **overrides):
        n = next(_counter)
        member_ids = members or [make_member()["id"]]
        project_id = project or make_project(members=member_ids)["id"]
        payload = {
            "title": f"Task {n}",
            "description": "Something to do",
            "deadline": "2030-01-15",
            "project": project_id,
            "assignedMembers": member_ids,
        }
        payload.update(overrides)
        resp = client.post("/api/tasks", json=payload, headers=auth_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
