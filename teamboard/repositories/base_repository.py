from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from bson import ObjectId
from bson.errors import InvalidId

from teamboard.db import SortSpec, TeamboardDB
from teamboard.models.base import DocumentModel

T = TypeVar("T", bound=DocumentModel)


def to_object_id(value: str) -> Optional[ObjectId]:
    """Parse a hex id string. Returns None for anything that is not a valid ObjectId."""
    if not isinstance(value, str):
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class MongoRepository(Generic[T]):
    """Generic CRUD over one collection, converting documents to ``model`` instances."""

    collection: str = ""
    model: Type[T]

    # Insertion order: ObjectIds are monotonic within a process.
    default_sort: SortSpec = [("_id", 1)]

    def __init__(self, db: TeamboardDB) -> None:
        self._db = db

    def _to_model(self, doc: Dict[str, Any]) -> T:
        return self.model.from_mongo_dict(doc)

    async def create(self, entity: T) -> T:
        doc = entity.to_mongo_dict()
        entity.id = await self._db.insert_one(self.collection, doc)
        return entity

    async def get_by_id(self, entity_id: str) -> Optional[T]:
        oid = to_object_id(entity_id)
        if oid is None:
            return None
        doc = await self._db.find_one(self.collection, {"_id": oid})
        return self._to_model(doc) if doc else None

    async def list_by(
        self,
        query: Dict[str, Any],
        sort: Optional[SortSpec] = None,
        limit: int = 0,
    ) -> List[T]:
        docs = await self._db.find_many(
            self.collection, query=query, sort=sort or self.default_sort, limit=limit
        )
        return [self._to_model(doc) for doc in docs]

    async def update(self, entity_id: str, changes: Dict[str, Any]) -> Optional[T]:
        """Merge ``changes`` into the stored document. Returns None if it does not exist."""
        oid = to_object_id(entity_id)
        if oid is None:
            return None
        if not changes:
            return await self.get_by_id(entity_id)
        doc = await self._db.update_one(self.collection, {"_id": oid}, changes)
        return self._to_model(doc) if doc else None

    async def delete(self, entity_id: str) -> Optional[T]:
        oid = to_object_id(entity_id)
        if oid is None:
            return None
        doc = await self._db.delete_one(self.collection, {"_id": oid})
        return self._to_model(doc) if doc else None
