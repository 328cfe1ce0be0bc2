from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from teamboard.models.base import ApiModel, DocumentModel
from teamboard.models.user import UserPublic


class Comment(DocumentModel):
    text: str
    author: str
    task: str


class CommentCreateRequest(ApiModel):
    text: str = Field(..., min_length=1)
    task: str = Field(..., min_length=1, description="Task id the comment belongs to")

    @field_validator("text")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be blank")
        return value


class CommentResponse(ApiModel):
    """Comment with its author populated as a public user."""

    id: str
    text: str
    task: str
    author: Optional[UserPublic] = None
    created_at: datetime

    @classmethod
    def build(cls, comment: Comment, author: Optional[UserPublic]) -> "CommentResponse":
        return cls(
            id=comment.id,
            text=comment.text,
            task=comment.task,
            author=author,
            created_at=comment.created_at,
        )
