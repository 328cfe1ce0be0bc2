from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from teamboard.models.base import ApiModel, DocumentModel


class Team(DocumentModel):
    """Collaboration group. The leader is always one of the members."""

    name: str
    description: Optional[str] = None
    leader: str
    members: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _leader_is_member(self) -> "Team":
        if self.leader not in self.members:
            self.members.insert(0, self.leader)
        return self

    def has_member(self, user_id: str) -> bool:
        return user_id in self.members


class TeamCreateRequest(ApiModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value
