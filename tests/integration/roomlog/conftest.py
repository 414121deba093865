import os
from typing import List

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from roomlog.api import create_app
from roomlog.core.settings import RoomLogSettings
from roomlog.database import MongoODM

TEST_MONGO_URI = os.environ.get("ROOMLOG_TEST_MONGO_URI", "mongodb://localhost:27017")
TEST_DB_NAME = "roomlog_test"
TEST_COLLECTIONS: List[str] = ["users", "logs"]


def _mongo_available() -> bool:
    client = MongoClient(TEST_MONGO_URI, serverSelectionTimeoutMS=2000)
    try:
        client.admin.command("ping")
        return True
    except PyMongoError:
        return False
    finally:
        client.close()


def pytest_collection_modifyitems(config, items):
    if _mongo_available():
        return
    skip = pytest.mark.skip(reason=f"MongoDB not reachable on {TEST_MONGO_URI}")
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(skip)


def _wipe_test_collections() -> None:
    client = MongoClient(TEST_MONGO_URI, serverSelectionTimeoutMS=2000)
    try:
        db = client[TEST_DB_NAME]
        for name in TEST_COLLECTIONS:
            db[name].delete_many({})
    except PyMongoError:
        pass
    finally:
        client.close()


@pytest.fixture(autouse=True)
def _clear_roomlog_collections():
    """Ensure a clean database before and after each test."""
    _wipe_test_collections()
    yield
    _wipe_test_collections()


@pytest.fixture
def test_settings() -> RoomLogSettings:
    return RoomLogSettings(_env_file=None, MONGO_URI=TEST_MONGO_URI, MONGO_DB=TEST_DB_NAME, BCRYPT_ROUNDS=4)


@pytest.fixture
def client(test_settings) -> TestClient:
    """In-process client whose lifespan opens and closes a real store handle."""
    with TestClient(create_app(test_settings)) as c:
        yield c


@pytest_asyncio.fixture
async def odm():
    handle = MongoODM(TEST_MONGO_URI, TEST_DB_NAME)
    await handle.initialize()
    try:
        yield handle
    finally:
        handle.close()
