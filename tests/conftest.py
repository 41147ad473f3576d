# tests/conftest.py
"""Shared fixtures: an in-memory async MongoDB and stubbed collections."""
import asyncio

import pytest
from pymongo import ReturnDocument
from pymongo.errors import OperationFailure
from unittest.mock import AsyncMock, MagicMock
from mongomock_motor import AsyncMongoMockClient

from mongo_sequence.core.default import reset_default_sequence


@pytest.fixture
def mongo_client():
    """In-memory async MongoDB client, fresh for every test."""
    return AsyncMongoMockClient()


@pytest.fixture
def database(mongo_client):
    return mongo_client["sequence_test"]


@pytest.fixture
def collection(database):
    return database["sequences"]


@pytest.fixture
def mock_collection():
    """Collection stub for injecting store responses and failures."""
    coll = MagicMock()
    coll.find_one_and_update = AsyncMock(return_value={"_id": "seq", "value": 1})
    coll.find_one = AsyncMock(return_value=None)
    return coll


@pytest.fixture(autouse=True)
def clear_default_sequence():
    reset_default_sequence()
    yield
    reset_default_sequence()


class OverlappingCounterCollection:
    """Async collection that applies $inc/upsert atomically but yields around it.

    Calls overlap the way concurrent round trips to a server do, and $inc on a
    non-numeric value is rejected with the server's TypeMismatch error.
    """

    def __init__(self):
        self.docs = {}
        self.lock = asyncio.Lock()
        self.in_flight = 0
        self.max_in_flight = 0

    async def find_one_and_update(self, filter, update, upsert=False, return_document=ReturnDocument.BEFORE):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            name = filter["_id"]
            step = update["$inc"]["value"]
            async with self.lock:
                current = self.docs.get(name)
                if current is None:
                    if not upsert:
                        return None
                    self.docs[name] = {"_id": name, "value": step}
                    before = None
                else:
                    value = current.get("value", 0)
                    if isinstance(value, bool) or not isinstance(value, (int, float)):
                        raise OperationFailure("Cannot apply $inc to a value of non-numeric type", code=14)
                    before = dict(current)
                    current["value"] = value + step
            # Response travels back while other commands run
            await asyncio.sleep(0)
            after = dict(self.docs[name]) if name in self.docs else None
            return after if return_document == ReturnDocument.AFTER else before
        finally:
            self.in_flight -= 1

    async def find_one(self, filter):
        await asyncio.sleep(0)
        doc = self.docs.get(filter["_id"])
        return dict(doc) if doc is not None else None


@pytest.fixture
def overlapping_collection():
    return OverlappingCounterCollection()
