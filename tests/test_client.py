# tests/test_client.py
import httpx
import pytest

from task_manager_api.client import ApiError, RequestContext, TaskManagerClient


@pytest.fixture
def api(client):
    """TaskManagerClient talking to the in-process app through the TestClient."""
    return TaskManagerClient(http=client)


@pytest.fixture
def ctx(api):
    auth = api.signup("Client User", "client@example.com", "secret123")
    return RequestContext(token=auth["token"])


def test_login_and_me(api, ctx):
    auth = api.login("client@example.com", "secret123")
    me = api.me(RequestContext(auth["token"]))
    assert me["email"] == "client@example.com"


def test_api_error_carries_envelope(api, ctx):
    with pytest.raises(ApiError) as info:
        api.create_team_member(ctx, {"name": "No email"})

    assert info.value.status_code == 400
    assert info.value.message == "Validation error"
    assert {e["field"] for e in info.value.errors} >= {"email", "designation"}


def test_unauthenticated_call(api):
    with pytest.raises(ApiError) as info:
        api.list_projects(RequestContext("bogus"))
    assert info.value.status_code == 401


def test_crud_and_dashboard(api, ctx):
    member = api.create_team_member(
        ctx, {"name": "Dana", "email": "dana@example.com", "designation": "PM"}
    )
    project = api.create_project(
        ctx, {"name": "Client project", "description": "via httpx", "teamMembers": [member["id"]]}
    )
    for n, status in enumerate(["to-do", "done", "done"]):
        api.create_task(
            ctx,
            {
                "title": f"Client task {n}",
                "description": "d",
                "deadline": "2030-01-01",
                "project": project["id"],
                "assignedMembers": [member["id"]],
                "status": status,
            },
        )

    summary = api.dashboard_summary(ctx)

    assert summary.team_members == 1
    assert summary.projects == 1
    assert summary.total_tasks == 3
    assert summary.tasks_by_status == {"to-do": 1, "in-progress": 0, "done": 2, "cancelled": 0}
    assert [t["title"] for t in summary.recent_tasks][0] == "Client task 2"

    done = api.list_tasks(ctx, status="done", project=project["id"])
    assert done["totalCount"] == 2

    updated = api.update_team_member(ctx, member["id"], {"designation": "Director"})
    assert updated["designation"] == "Director"

    assert api.logout(ctx) == {"message": "User logged out"}


def test_owned_http_client_is_closed():
    api = TaskManagerClient("http://localhost:1")
    with api:
        pass
    assert api._http.is_closed


def test_injected_http_client_is_left_open():
    http = httpx.Client(base_url="http://localhost:1")
    with TaskManagerClient(http=http):
        pass
    assert not http.is_closed
    http.close()
