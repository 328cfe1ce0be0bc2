"""Pytest fixtures for Teamboard integration tests.

These tests require MongoDB at mongodb://localhost:27018 (see tests/docker-compose.yml) and are skipped when it is not
reachable.
"""

from typing import Generator, List

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from teamboard import TeamboardDB, TeamboardService
from teamboard.core.config import TeamboardConfig, TeamboardSettings, reset_teamboard_config

TEST_MONGO_URI = "mongodb://localhost:27018"
TEST_DB_NAME = "teamboard_test"
TEST_COLLECTIONS: List[str] = ["users", "teams", "projects", "tasks", "comments", "activities"]


def _mongo_available() -> bool:
    client = MongoClient(TEST_MONGO_URI, serverSelectionTimeoutMS=2000)
    try:
        client.admin.command("ping")
        return True
    except PyMongoError:
        return False
    finally:
        client.close()


@pytest.fixture(scope="session")
def mongo_available() -> bool:
    return _mongo_available()


@pytest.fixture(autouse=True)
def _require_mongo(mongo_available):
    if not mongo_available:
        pytest.skip(f"MongoDB not reachable at {TEST_MONGO_URI}")


@pytest.fixture(autouse=True)
def _wipe_test_collections(_require_mongo) -> Generator[None, None, None]:
    """Start every test from empty collections."""
    client = MongoClient(TEST_MONGO_URI)
    db = client[TEST_DB_NAME]
    for name in TEST_COLLECTIONS:
        db[name].delete_many({})
    yield
    client.close()


@pytest.fixture(autouse=True)
def reset_config():
    reset_teamboard_config()
    yield
    reset_teamboard_config()


@pytest.fixture
def config() -> TeamboardConfig:
    return TeamboardConfig(
        TEAMBOARD=TeamboardSettings(
            MONGO_URI=TEST_MONGO_URI,
            MONGO_DB=TEST_DB_NAME,
            JWT_SECRET="integration-test-secret",
        )
    )


@pytest.fixture
def client(config) -> Generator[TestClient, None, None]:
    """In-process TestClient for a TeamboardService backed by the test MongoDB."""
    service = TeamboardService(config=config)
    with TestClient(service.app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def teamboard_db():
    db = TeamboardDB(uri=TEST_MONGO_URI, db_name=TEST_DB_NAME)
    await db.connect()
    try:
        yield db
    finally:
        await db.disconnect()
