"""Unit tests for the TeamboardDB wrapper (motor is mocked)."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from pymongo import ReturnDocument

from teamboard.db import TeamboardDB


@pytest.fixture
def mock_collection():
    return MagicMock()


@pytest.fixture
def connected_db(mock_collection):
    """A TeamboardDB whose database handle returns ``mock_collection`` for every name."""
    db = TeamboardDB()
    db._client = MagicMock()
    db._db = MagicMock()
    db._db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


class TestTeamboardDBInit:
    def test_init_stores_params(self):
        db = TeamboardDB(uri="mongodb://test:27017", db_name="test_db")

        assert db._uri == "mongodb://test:27017"
        assert db._db_name == "test_db"
        assert db.client is None
        assert db.db is None
        assert db.is_connected is False

    def test_init_default_params(self):
        db = TeamboardDB()

        assert db._uri == "mongodb://localhost:27017"
        assert db._db_name == "teamboard"


class TestTeamboardDBConnect:
    @pytest.mark.asyncio
    async def test_connect_initializes_client(self):
        mock_client = MagicMock()
        mock_database = MagicMock()
        mock_client.__getitem__ = MagicMock(return_value=mock_database)

        with patch("teamboard.db.AsyncIOMotorClient", return_value=mock_client) as mock_ctor:
            db = TeamboardDB(uri="mongodb://test:27017", db_name="tb")
            result = await db.connect()

        assert result is db
        assert db.client is mock_client
        assert db.db is mock_database
        mock_ctor.assert_called_once_with("mongodb://test:27017", tz_aware=True)
        mock_client.__getitem__.assert_called_once_with("tb")

    @pytest.mark.asyncio
    async def test_connect_idempotent(self):
        mock_client = MagicMock()
        mock_client.__getitem__ = MagicMock(return_value=MagicMock())

        with patch("teamboard.db.AsyncIOMotorClient", return_value=mock_client) as mock_ctor:
            db = TeamboardDB()
            await db.connect()
            await db.connect()

        mock_ctor.assert_called_once()

    @pytest.mark.asyncio
    async def test_disconnect_cleans_up(self):
        mock_client = MagicMock()
        mock_client.__getitem__ = MagicMock(return_value=MagicMock())

        with patch("teamboard.db.AsyncIOMotorClient", return_value=mock_client):
            db = TeamboardDB()
            await db.connect()
            await db.disconnect()

        mock_client.close.assert_called_once()
        assert db.is_connected is False
        assert db.db is None

    @pytest.mark.asyncio
    async def test_context_manager(self):
        mock_client = MagicMock()
        mock_client.__getitem__ = MagicMock(return_value=MagicMock())

        with patch("teamboard.db.AsyncIOMotorClient", return_value=mock_client):
            async with TeamboardDB() as db:
                assert db.is_connected is True

        mock_client.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_operations_connect_lazily(self, mock_collection):
        mock_client = MagicMock()
        mock_database = MagicMock()
        mock_database.__getitem__ = MagicMock(return_value=mock_collection)
        mock_client.__getitem__ = MagicMock(return_value=mock_database)
        mock_collection.find_one = AsyncMock(return_value=None)

        with patch("teamboard.db.AsyncIOMotorClient", return_value=mock_client):
            db = TeamboardDB()
            await db.find_one("users", {"email": "a@x.com"})

        assert db.is_connected is True


class TestTeamboardDBCrud:
    @pytest.mark.asyncio
    async def test_insert_one_returns_string_id(self, connected_db, mock_collection):
        oid = ObjectId()
        mock_collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=oid))

        result = await connected_db.insert_one("teams", {"name": "Alpha"})

        assert result == str(oid)
        mock_collection.insert_one.assert_awaited_once_with({"name": "Alpha"})

    @pytest.mark.asyncio
    async def test_find_many_applies_sort_and_limit(self, connected_db, mock_collection):
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.limit.return_value = cursor
        cursor.to_list = AsyncMock(return_value=[{"_id": 1}])
        mock_collection.find.return_value = cursor

        docs = await connected_db.find_many(
            "activities", {"team": "t1"}, sort=[("created_at", -1)], limit=50
        )

        assert docs == [{"_id": 1}]
        mock_collection.find.assert_called_once_with({"team": "t1"})
        cursor.sort.assert_called_once_with([("created_at", -1)])
        cursor.limit.assert_called_once_with(50)

    @pytest.mark.asyncio
    async def test_find_many_without_sort_or_limit(self, connected_db, mock_collection):
        cursor = MagicMock()
        cursor.to_list = AsyncMock(return_value=[])
        mock_collection.find.return_value = cursor

        await connected_db.find_many("projects")

        mock_collection.find.assert_called_once_with({})
        cursor.sort.assert_not_called()
        cursor.limit.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_one_returns_updated_document(self, connected_db, mock_collection):
        updated = {"_id": ObjectId(), "status": "done"}
        mock_collection.find_one_and_update = AsyncMock(return_value=updated)

        result = await connected_db.update_one("tasks", {"_id": updated["_id"]}, {"status": "done"})

        assert result == updated
        mock_collection.find_one_and_update.assert_awaited_once_with(
            {"_id": updated["_id"]}, {"$set": {"status": "done"}}, return_document=ReturnDocument.AFTER
        )

    @pytest.mark.asyncio
    async def test_delete_one_returns_deleted_document(self, connected_db, mock_collection):
        mock_collection.find_one_and_delete = AsyncMock(return_value=None)

        assert await connected_db.delete_one("tasks", {"_id": ObjectId()}) is None

    @pytest.mark.asyncio
    async def test_create_unique_index(self, connected_db, mock_collection):
        mock_collection.create_index = AsyncMock(return_value="email_1")

        assert await connected_db.create_index("users", "email", unique=True) == "email_1"
        mock_collection.create_index.assert_awaited_once_with("email", unique=True)
