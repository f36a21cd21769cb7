# tests/test_team_api.py
import uuid

from fastapi import status


class TestCreateTeamMember:

    def test_create_and_fetch(self, client, auth_headers):
        payload = {"name": "  Ada Lovelace ", "email": "Ada@Example.com", "designation": "Engineer"}

        resp = client.post("/api/teams", json=payload, headers=auth_headers)

        assert resp.status_code == status.HTTP_201_CREATED
        created = resp.json()
        assert created["name"] == "Ada Lovelace"
        assert created["email"] == "ada@example.com"
        assert "createdAt" in created and "updatedAt" in created

        fetched = client.get(f"/api/teams/{created['id']}", headers=auth_headers)
        assert fetched.status_code == status.HTTP_200_OK
        assert fetched.json()["id"] == created["id"]

    def test_duplicate_email_is_rejected(self, client, auth_headers, make_member):
        make_member(email="dup@example.com")

        resp = client.post(
            "/api/teams",
            json={"name": "Other", "email": "DUP@example.com", "designation": "QA"},
            headers=auth_headers,
        )

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.json()["message"] == "Email already in use"

    def test_missing_fields_give_validation_envelope(self, client, auth_headers):
        resp = client.post("/api/teams", json={"name": "Solo"}, headers=auth_headers)

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        body = resp.json()
        assert body["message"] == "Validation error"
        fields = {e["field"] for e in body["errors"]}
        assert {"email", "designation"} <= fields

    def test_invalid_email(self, client, auth_headers):
        resp = client.post(
            "/api/teams",
            json={"name": "Bad", "email": "not-an-email", "designation": "QA"},
            headers=auth_headers,
        )
        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.json()["errors"][0]["field"] == "email"

    def test_blank_name_is_rejected(self, client, auth_headers):
        resp = client.post(
            "/api/teams",
            json={"name": "   ", "email": "blank@example.com", "designation": "QA"},
            headers=auth_headers,
        )
        assert resp.status_code == status.HTTP_400_BAD_REQUEST


class TestListTeamMembers:

    def test_pagination_envelope(self, client, auth_headers, make_member):
        for _ in range(15):
            make_member()

        resp = client.get("/api/teams", params={"page": 2, "limit": 10}, headers=auth_headers)

        assert resp.status_code == status.HTTP_200_OK
        body = resp.json()
        assert len(body["data"]) == 5
        assert body["totalCount"] == 15
        assert body["totalPages"] == 2
        assert body["currentPage"] == 2

    def test_default_limit(self, client, auth_headers, make_member):
        for _ in range(12):
            make_member()

        body = client.get("/api/teams", headers=auth_headers).json()
        assert len(body["data"]) == 10
        assert body["currentPage"] == 1

    def test_empty_listing(self, client, auth_headers):
        body = client.get("/api/teams", headers=auth_headers).json()
        assert body == {"data": [], "totalCount": 0, "totalPages": 0, "currentPage": 1}

    def test_limit_above_maximum(self, client, auth_headers):
        resp = client.get("/api/teams", params={"limit": 1000}, headers=auth_headers)
        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.json()["errors"][0]["field"] == "limit"

    def test_page_zero(self, client, auth_headers):
        resp = client.get("/api/teams", params={"page": 0}, headers=auth_headers)
        assert resp.status_code == status.HTTP_400_BAD_REQUEST

    def test_page_too_large(self, client, auth_headers):
        resp = client.get(
            "/api/teams", params={"page": 100000000000000000000}, headers=auth_headers
        )

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.json()["errors"] == [{"field": "page", "message": "Page is out of range"}]


class TestUpdateTeamMember:

    def test_partial_update(self, client, auth_headers, make_member):
        member = make_member(designation="Engineer")

        resp = client.put(
            f"/api/teams/{member['id']}",
            json={"designation": "Lead"},
            headers=auth_headers,
        )

        assert resp.status_code == status.HTTP_200_OK
        body = resp.json()
        assert body["designation"] == "Lead"
        assert body["name"] == member["name"]

    def test_update_to_taken_email(self, client, auth_headers, make_member):
        make_member(email="taken@example.com")
        member = make_member()

        resp = client.put(
            f"/api/teams/{member['id']}",
            json={"email": "taken@example.com"},
            headers=auth_headers,
        )
        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.json()["message"] == "Email already in use"

    def test_keeping_own_email_is_allowed(self, client, auth_headers, make_member):
        member = make_member(email="same@example.com")

        resp = client.put(
            f"/api/teams/{member['id']}",
            json={"email": "same@example.com", "name": "Renamed"},
            headers=auth_headers,
        )
        assert resp.status_code == status.HTTP_200_OK
        assert resp.json()["name"] == "Renamed"

    def test_update_unknown_member(self, client, auth_headers):
        resp = client.put(
            f"/api/teams/{uuid.uuid4()}",
            json={"name": "Ghost"},
            headers=auth_headers,
        )
        assert resp.status_code == status.HTTP_404_NOT_FOUND
        assert resp.json()["message"] == "Team member not found"


class TestDeleteTeamMember:

    def test_delete(self, client, auth_headers, make_member):
        member = make_member()

        resp = client.delete(f"/api/teams/{member['id']}", headers=auth_headers)

        assert resp.status_code == status.HTTP_200_OK
        assert resp.json() == {"message": "Team member deleted successfully"}
        assert client.get(f"/api/teams/{member['id']}", headers=auth_headers).status_code == 404

    def test_delete_nonexistent(self, client, auth_headers):
        resp = client.delete(f"/api/teams/{uuid.uuid4()}", headers=auth_headers)
        assert resp.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_malformed_id(self, client, auth_headers):
        resp = client.delete("/api/teams/not-a-uuid", headers=auth_headers)
        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.json()["errors"] == [{"field": "id", "message": "Invalid ID format"}]

    def test_referenced_member_cannot_be_deleted(self, client, auth_headers, make_member, make_project):
        member = make_member()
        make_project(members=[member["id"]])

        resp = client.delete(f"/api/teams/{member['id']}", headers=auth_headers)

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert "cannot be deleted" in resp.json()["message"]


def test_routes_require_authentication(client):
    resp = client.get("/api/teams")
    assert resp.status_code == status.HTTP_401_UNAUTHORIZED
    assert resp.json() == {"message": "Authentication required"}
