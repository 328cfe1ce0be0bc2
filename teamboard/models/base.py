from datetime import datetime
from typing import Any, Dict, Optional, Type, TypeVar

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mindtrace.core import utcnow

M = TypeVar("M", bound="DocumentModel")


class ApiModel(BaseModel):
    """Base for request/response bodies: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DocumentModel(ApiModel):
    """Base for persisted entities.

    ``id`` maps onto MongoDB's ``_id``. References to other entities are stored as hex id strings.
    """

    id: Optional[str] = Field(default=None, description="MongoDB document ID")
    created_at: datetime = Field(default_factory=utcnow)

    def to_mongo_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary for MongoDB insertion (excludes None id)."""
        data = self.model_dump()
        doc_id = data.pop("id", None)
        if doc_id is not None:
            data["_id"] = ObjectId(doc_id)
        return data

    @classmethod
    def from_mongo_dict(cls: Type[M], data: Dict[str, Any]) -> M:
        """Create an instance from a MongoDB document."""
        data = dict(data)
        if "_id" in data:
            data["id"] = str(data.pop("_id"))
        return cls.model_validate(data)
