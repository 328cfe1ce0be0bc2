"""Unit tests for the Teamboard pydantic models."""

import pytest
from bson import ObjectId
from pydantic import ValidationError

from teamboard.models import (
    LoginPayload,
    SignupPayload,
    Task,
    TaskCreateRequest,
    TaskStatus,
    TaskUpdateRequest,
    Team,
    User,
)


class TestDocumentModel:
    def test_to_mongo_dict_without_id(self):
        doc = Team(name="Alpha", leader="u1").to_mongo_dict()

        assert "_id" not in doc
        assert "id" not in doc
        assert doc["members"] == ["u1"]

    def test_mongo_round_trip_maps_id(self):
        oid = ObjectId()
        task = Task.from_mongo_dict({"_id": oid, "title": "x", "project": "p1", "status": "in-progress"})

        assert task.id == str(oid)
        assert task.status == TaskStatus.IN_PROGRESS
        assert task.to_mongo_dict()["_id"] == oid
        assert task.to_mongo_dict()["status"] == "in-progress"

    def test_wire_format_is_camel_case(self):
        user = User(name="Ada", email="a@x.com", password_hash="h")

        assert "passwordHash" in user.model_dump(by_alias=True)
        assert "createdAt" in user.model_dump(by_alias=True)


class TestTeam:
    def test_leader_always_member(self):
        team = Team(name="Alpha", leader="u1", members=["u2"])

        assert team.members == ["u1", "u2"]
        assert team.has_member("u1")


class TestPayloads:
    def test_signup_normalizes_email_and_name(self):
        payload = SignupPayload(name="  Ada ", email=" Ada@Example.COM ", password="pw")

        assert payload.name == "Ada"
        assert payload.email == "ada@example.com"

    def test_login_normalizes_email(self):
        assert LoginPayload(email="A@X.COM", password="pw").email == "a@x.com"

    @pytest.mark.parametrize("email", ["", "no-at-sign", "a@b", "a b@c.com"])
    def test_signup_rejects_bad_email(self, email):
        with pytest.raises(ValidationError):
            SignupPayload(name="Ada", email=email, password="pw")


class TestTaskUpdateRequest:
    def test_changes_only_include_supplied_fields(self):
        update = TaskUpdateRequest.model_validate({"status": "done", "assignee": None})

        assert update.changes() == {"status": "done", "assignee": None}

    def test_camel_case_due_date(self):
        update = TaskUpdateRequest.model_validate({"dueDate": "2026-03-01T00:00:00Z"})

        assert list(update.changes()) == ["due_date"]

    @pytest.mark.parametrize("body", [{"status": "archived"}, {"status": None}, {"title": "  "}, {"title": None}])
    def test_invalid_updates(self, body):
        with pytest.raises(ValidationError):
            TaskUpdateRequest.model_validate(body)

    def test_blank_due_date_clears_it(self):
        update = TaskUpdateRequest.model_validate({"dueDate": "", "assignee": " "})

        assert update.changes() == {"due_date": None, "assignee": None}


class TestTaskCreateRequest:
    def test_blank_optional_fields_are_unset(self):
        request = TaskCreateRequest.model_validate({"title": "t", "project": "p", "dueDate": "", "assignee": ""})

        assert request.due_date is None
        assert request.assignee is None

    def test_malformed_due_date_still_rejected(self):
        with pytest.raises(ValidationError):
            TaskCreateRequest.model_validate({"title": "t", "project": "p", "dueDate": "next tuesday"})
