"""Async MongoDB wrapper for the Teamboard service.

Uses motor (async pymongo driver) directly. Connections are opened lazily on first use.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ReturnDocument

SortSpec = List[Tuple[str, int]]


class TeamboardDB:
    """Async MongoDB wrapper with proper resource management.

    A thin wrapper around motor that handles connection lifecycle.
    No application-specific logic, just generic MongoDB operations.

    Example:
        ```python
        async with TeamboardDB(uri="mongodb://localhost:27017", db_name="teamboard") as db:
            user_id = await db.insert_one("users", {"name": "Alice"})
            user = await db.find_one("users", {"name": "Alice"})
        ```
    """

    def __init__(
        self,
        uri: str = "mongodb://localhost:27017",
        db_name: str = "teamboard",
    ):
        """Initialize with connection parameters. No connection made until connect()."""
        self._uri = uri
        self._db_name = db_name
        self._client: Optional[AsyncIOMotorClient] = None
        self._db: Optional[AsyncIOMotorDatabase] = None

    @property
    def client(self) -> Optional[AsyncIOMotorClient]:
        """The MongoDB client (None if not connected)."""
        return self._client

    @property
    def db(self) -> Optional[AsyncIOMotorDatabase]:
        """The database instance (None if not connected)."""
        return self._db

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> "TeamboardDB":
        """Connect to MongoDB. Returns self for chaining."""
        if self._client is not None:
            return self
        self._client = AsyncIOMotorClient(self._uri, tz_aware=True)
        self._db = self._client[self._db_name]
        return self

    async def disconnect(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            self._db = None

    async def __aenter__(self) -> "TeamboardDB":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.disconnect()

    async def _collection(self, name: str) -> AsyncIOMotorCollection:
        if not self.is_connected:
            await self.connect()
        return self._db[name]

    # -------------------------------------------------------------------------
    # Generic CRUD
    # -------------------------------------------------------------------------

    async def insert_one(self, collection: str, document: Dict[str, Any]) -> str:
        """Insert a document. Returns inserted ID as string."""
        coll = await self._collection(collection)
        result = await coll.insert_one(document)
        return str(result.inserted_id)

    async def find_one(self, collection: str, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        coll = await self._collection(collection)
        return await coll.find_one(query)

    async def find_many(
        self,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        """Find multiple documents. A ``limit`` of 0 means no limit."""
        coll = await self._collection(collection)
        cursor = coll.find(query or {})
        if sort:
            cursor = cursor.sort(sort)
        if limit > 0:
            cursor = cursor.limit(limit)
        return await cursor.to_list(length=None)

    async def update_one(
        self, collection: str, query: Dict[str, Any], changes: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Apply ``$set`` with ``changes`` to one document. Returns the updated document, or None."""
        coll = await self._collection(collection)
        return await coll.find_one_and_update(
            query, {"$set": changes}, return_document=ReturnDocument.AFTER
        )

    async def delete_one(self, collection: str, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Delete one document. Returns the deleted document, or None if nothing matched."""
        coll = await self._collection(collection)
        return await coll.find_one_and_delete(query)

    async def create_index(
        self,
        collection: str,
        keys: Union[str, Sequence[Tuple[str, int]]],
        unique: bool = False,
    ) -> str:
        """Create an index if it does not already exist. Returns the index name."""
        coll = await self._collection(collection)
        return await coll.create_index(keys, unique=unique)
