"""Shared fixtures for Teamboard unit tests.

Everything here runs without MongoDB: ``FakeTeamboardDB`` implements the subset of the ``TeamboardDB`` interface the
repositories use, on top of plain dictionaries.
"""

import copy
from typing import Any, Dict, List, Optional, Tuple

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from teamboard.core.config import TeamboardConfig, TeamboardSettings, reset_teamboard_config
from teamboard.core.security import TokenService
from teamboard.teamboard import TeamboardService

TEST_SECRET = "unit-test-secret"


def _matches(doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
    for key, expected in query.items():
        actual = doc.get(key)
        if isinstance(expected, dict) and "$in" in expected:
            if actual not in expected["$in"]:
                return False
        elif isinstance(actual, list) and not isinstance(expected, list):
            if expected not in actual:
                return False
        elif actual != expected:
            return False
    return True


class FakeTeamboardDB:
    """In-memory stand-in for TeamboardDB. Documents keep insertion order."""

    def __init__(self) -> None:
        self.collections: Dict[str, List[Dict[str, Any]]] = {}
        self.unique_indexes: Dict[str, List[str]] = {}
        self.connected = False
        self.disconnect_calls = 0

    @property
    def is_connected(self) -> bool:
        return self.connected

    async def connect(self) -> "FakeTeamboardDB":
        self.connected = True
        return self

    async def disconnect(self) -> None:
        self.connected = False
        self.disconnect_calls += 1

    def _docs(self, collection: str) -> List[Dict[str, Any]]:
        return self.collections.setdefault(collection, [])

    async def create_index(self, collection: str, keys, unique: bool = False) -> str:
        if unique:
            self.unique_indexes.setdefault(collection, []).append(keys)
        return f"{keys}_1"

    async def insert_one(self, collection: str, document: Dict[str, Any]) -> str:
        doc = copy.deepcopy(document)
        doc.setdefault("_id", ObjectId())
        for key in self.unique_indexes.get(collection, []):
            if any(existing.get(key) == doc.get(key) for existing in self._docs(collection)):
                raise DuplicateKeyError(f"E11000 duplicate key error collection: {collection} index: {key}_1")
        self._docs(collection).append(doc)
        return str(doc["_id"])

    async def find_one(self, collection: str, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for doc in self._docs(collection):
            if _matches(doc, query):
                return copy.deepcopy(doc)
        return None

    async def find_many(
        self,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        docs = [copy.deepcopy(d) for d in self._docs(collection) if _matches(d, query or {})]
        for key, direction in reversed(sort or []):
            docs.sort(key=lambda d: d[key], reverse=direction < 0)
        if limit > 0:
            docs = docs[:limit]
        return docs

    async def update_one(
        self, collection: str, query: Dict[str, Any], changes: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        for doc in self._docs(collection):
            if _matches(doc, query):
                doc.update(copy.deepcopy(changes))
                return copy.deepcopy(doc)
        return None

    async def delete_one(self, collection: str, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        docs = self._docs(collection)
        for index, doc in enumerate(docs):
            if _matches(doc, query):
                return docs.pop(index)
        return None


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Keep the cached config and TEAMBOARD__* env vars from leaking between tests."""
    monkeypatch.delenv("TEAMBOARD__JWT_SECRET", raising=False)
    reset_teamboard_config()
    yield
    reset_teamboard_config()


@pytest.fixture
def fake_db() -> FakeTeamboardDB:
    return FakeTeamboardDB()


@pytest.fixture
def config() -> TeamboardConfig:
    return TeamboardConfig(TEAMBOARD=TeamboardSettings(JWT_SECRET=TEST_SECRET))


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(TEST_SECRET)


@pytest.fixture
def service(config, fake_db) -> TeamboardService:
    return TeamboardService(config=config, db=fake_db)


@pytest.fixture
def client(service):
    """TestClient that runs the service lifespan (startup creates the users.email index)."""
    with TestClient(service.app) as test_client:
        yield test_client


def _signup(client, name: str = "Ada", email: str = "a@x.com", password: str = "pw123") -> Dict[str, Any]:
    resp = client.post("/api/auth/signup", json={"name": name, "email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()


def _auth_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client) -> Dict[str, Any]:
    """A signed-up user: ``{"token", "user", "headers"}``."""
    body = _signup(client, "Alice", "alice@example.com", "pw123")
    return {**body, "headers": _auth_headers(body["token"])}


@pytest.fixture
def bob(client) -> Dict[str, Any]:
    body = _signup(client, "Bob", "bob@example.com", "hunter2")
    return {**body, "headers": _auth_headers(body["token"])}
