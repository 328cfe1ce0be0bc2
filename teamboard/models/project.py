from typing import Optional

from pydantic import Field, field_validator

from teamboard.models.base import ApiModel, DocumentModel


class Project(DocumentModel):
    name: str
    description: Optional[str] = None
    team: str


class ProjectCreateRequest(ApiModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    team: str = Field(..., min_length=1, description="Owning team id")

    @field_validator("name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value
