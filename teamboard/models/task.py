from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from teamboard.models.base import ApiModel, DocumentModel


class TaskStatus(str, Enum):
    """Task workflow states. Any state may follow any other."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class Task(DocumentModel):
    title: str
    description: Optional[str] = None
    project: str
    assignee: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    due_date: Optional[datetime] = None

    def to_mongo_dict(self) -> dict:
        data = super().to_mongo_dict()
        data["status"] = self.status.value
        return data


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _strip_title(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("title must not be blank")
    return value


class TaskCreateRequest(ApiModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    project: str = Field(..., min_length=1, description="Owning project id")
    assignee: Optional[str] = None
    due_date: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        return _strip_title(value)

    @field_validator("due_date", "assignee", mode="before")
    @classmethod
    def _blank_is_unset(cls, value):
        return _blank_to_none(value)


class TaskUpdateRequest(ApiModel):
    """Partial update. Only fields present in the request body are applied."""

    title: Optional[str] = None
    description: Optional[str] = None
    assignee: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("title must not be blank")
        return _strip_title(value)

    @field_validator("due_date", "assignee", mode="before")
    @classmethod
    def _blank_is_unset(cls, value):
        """Form clients send "" for a cleared date or assignee."""
        return _blank_to_none(value)

    @field_validator("status")
    @classmethod
    def _status_not_null(cls, value: Optional[TaskStatus]) -> Optional[TaskStatus]:
        if value is None:
            raise ValueError("status must be one of: todo, in-progress, done")
        return value

    def changes(self) -> dict:
        """Return only the fields the caller supplied, keyed by storage name."""
        data = self.model_dump(exclude_unset=True)
        if "status" in data:
            data["status"] = data["status"].value
        return data
