# tests/test_schemas.py
import uuid
from datetime import date

import pytest
from pydantic import ValidationError

from task_manager_api.db.models import TaskStatus
from task_manager_api.exceptions import InvalidInputError
from task_manager_api.schemas import (
    ProjectCreate,
    TaskCreate,
    TaskUpdate,
    TeamMemberUpdate,
)
from task_manager_api.schemas.common import parse_date, parse_id, parse_optional_date, total_pages


def _task_payload(**overrides):
    payload = {
        "title": " Ship it ",
        "description": "Release 1.0",
        "deadline": "2030-06-30",
        "project": str(uuid.uuid4()),
        "assignedMembers": [str(uuid.uuid4())],
    }
    payload.update(overrides)
    return payload


class TestTaskCreate:

    def test_defaults_and_normalization(self):
        task = TaskCreate.model_validate(_task_payload())

        assert task.title == "Ship it"
        assert task.status is TaskStatus.TODO
        assert task.deadline == date(2030, 6, 30)

    def test_snake_case_input_is_accepted(self):
        payload = _task_payload()
        payload["assigned_members"] = payload.pop("assignedMembers")

        task = TaskCreate.model_validate(payload)

        assert len(task.assigned_members) == 1

    def test_ids_are_canonicalized(self):
        raw = uuid.uuid4()
        task = TaskCreate.model_validate(_task_payload(project=raw.hex.upper()))
        assert task.project == str(raw)

    @pytest.mark.parametrize("missing", ["title", "description", "deadline", "project", "assignedMembers"])
    def test_required_fields(self, missing):
        payload = _task_payload()
        del payload[missing]
        with pytest.raises(ValidationError):
            TaskCreate.model_validate(payload)


class TestUpdates:

    def test_everything_optional(self):
        assert TaskUpdate.model_validate({}).model_dump(exclude_none=True) == {}

    def test_present_fields_are_still_validated(self):
        with pytest.raises(ValidationError):
            TeamMemberUpdate.model_validate({"email": "nope"})
        with pytest.raises(ValidationError):
            TaskUpdate.model_validate({"title": "  "})

    def test_email_lowercased(self):
        update = TeamMemberUpdate.model_validate({"email": " Dev@Example.COM "})
        assert update.email == "dev@example.com"


def test_project_members_deduplicated_in_order():
    a, b = str(uuid.uuid4()), str(uuid.uuid4())
    project = ProjectCreate.model_validate(
        {"name": "P", "description": "D", "teamMembers": [b, a, b, a]}
    )
    assert project.team_members == [b, a]


class TestParsers:

    def test_parse_date_accepts_datetimes(self):
        assert parse_date("2030-01-02T23:59:59+02:00") == date(2030, 1, 2)
        assert parse_date("2030-01-02T10:00:00Z") == date(2030, 1, 2)

    def test_parse_date_rejects_garbage(self):
        with pytest.raises(ValueError, match="Invalid date format"):
            parse_date("02/01/2030")

    def test_parse_optional_date(self):
        assert parse_optional_date(None, "startDate") is None
        assert parse_optional_date("", "startDate") is None
        with pytest.raises(InvalidInputError) as info:
            parse_optional_date("later", "startDate")
        assert info.value.errors == [{"field": "startDate", "message": "Invalid date format"}]

    def test_parse_id(self):
        raw = uuid.uuid4()
        assert parse_id(str(raw).upper()) == str(raw)
        with pytest.raises(InvalidInputError):
            parse_id("42", "project")

    @pytest.mark.parametrize(
        "count, limit, expected",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (15, 10, 2), (101, 100, 2)],
    )
    def test_total_pages(self, count, limit, expected):
        assert total_pages(count, limit) == expected
