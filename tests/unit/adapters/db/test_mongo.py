"""Unit tests for the MongoDB record store."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError

from workasana.adapters.db import DuplicateRecordError
from workasana.adapters.db.mongo import MongoRecordStore, _from_mongo, _to_mongo


class TestIdTranslation:
    """Test the id <-> _id mapping."""

    def test_filter_id_renamed(self) -> None:
        """id becomes _id, including inside $or clauses."""
        assert _to_mongo({"id": {"$in": ["a"]}, "$or": [{"id": "b"}, {"name": "x"}]}) == {
            "_id": {"$in": ["a"]},
            "$or": [{"_id": "b"}, {"name": "x"}],
        }

    def test_empty_filter(self) -> None:
        """No filter matches everything."""
        assert _to_mongo(None) == {}

    def test_document_id_renamed(self) -> None:
        """Documents come back with id instead of _id."""
        assert _from_mongo({"_id": "abc", "name": "Core"}) == {"id": "abc", "name": "Core"}


class TestMongoRecordStore:
    """Test store operations against a mocked database."""

    @pytest.fixture
    def collection(self) -> MagicMock:
        """Mock motor collection."""
        return MagicMock()

    @pytest.fixture
    def store(self, collection: MagicMock) -> MongoRecordStore:
        """Store with a mocked database handle."""
        store = MongoRecordStore("mongodb://localhost:27017", "test")
        db = MagicMock()
        db.__getitem__.return_value = collection
        store._db = db
        return store

    def test_requires_connection(self) -> None:
        """Using the store before connect is an error."""
        with pytest.raises(RuntimeError, match="not connected"):
            _ = MongoRecordStore("mongodb://localhost:27017", "test").db

    async def test_insert_stores_id_as_underscore_id(
        self, store: MongoRecordStore, collection: MagicMock
    ) -> None:
        """The record id is written as the document _id."""
        collection.insert_one = AsyncMock()

        record = await store.insert_one("teams", {"name": "Core"})

        stored = collection.insert_one.call_args.args[0]
        assert stored["_id"] == record["id"]
        assert "id" not in stored
        assert record["is_active"] is True

    async def test_duplicate_key(self, store: MongoRecordStore, collection: MagicMock) -> None:
        """Unique index violations become DuplicateRecordError."""
        collection.insert_one = AsyncMock(side_effect=DuplicateKeyError("E11000"))

        with pytest.raises(DuplicateRecordError):
            await store.insert_one("users", {"username": "alice"})

    async def test_get_by_id(self, store: MongoRecordStore, collection: MagicMock) -> None:
        """Lookups query by _id and translate the result."""
        collection.find_one = AsyncMock(return_value={"_id": "t1", "name": "Core"})

        record = await store.get_by_id("teams", "t1")

        collection.find_one.assert_awaited_once_with({"_id": "t1"})
        assert record == {"id": "t1", "name": "Core"}

    async def test_update_sets_changes(
        self, store: MongoRecordStore, collection: MagicMock
    ) -> None:
        """Updates use $set and never overwrite the id."""
        collection.find_one_and_update = AsyncMock(return_value={"_id": "t1", "name": "New"})

        record = await store.update_by_id("teams", "t1", {"name": "New", "id": "other"})

        query, update = collection.find_one_and_update.call_args.args
        assert query == {"_id": "t1"}
        assert update["$set"]["name"] == "New"
        assert "id" not in update["$set"]
        assert "updated_at" in update["$set"]
        assert record == {"id": "t1", "name": "New"}

    async def test_count(self, store: MongoRecordStore, collection: MagicMock) -> None:
        """Counts translate the filter."""
        collection.count_documents = AsyncMock(return_value=3)

        assert await store.count("tasks", {"id": "x"}) == 3
        collection.count_documents.assert_awaited_once_with({"_id": "x"})
