"""MongoDB record store using motor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from workasana.adapters.db.base import BaseRecordStore, DuplicateRecordError, parse_sort
from workasana.core.interfaces import Filter, Record

logger = structlog.get_logger()

# (collection, keys, index options)
INDEXES: list[tuple[str, list[tuple[str, int]], dict[str, Any]]] = [
    ("users", [("username", ASCENDING)], {"unique": True}),
    ("users", [("email", ASCENDING)], {"unique": True, "sparse": True}),
    # Tag names are unique among active tags only.
    (
        "tags",
        [("name", ASCENDING)],
        {"unique": True, "partialFilterExpression": {"is_active": True}},
    ),
    ("tasks", [("project", ASCENDING), ("team", ASCENDING), ("status", ASCENDING)], {}),
    ("tasks", [("owners", ASCENDING), ("status", ASCENDING)], {}),
    ("tasks", [("tags", ASCENDING)], {}),
]


def _to_mongo(filter: Filter | None) -> dict[str, Any]:
    """Rename ``id`` to ``_id`` throughout a filter."""
    if not filter:
        return {}
    translated: dict[str, Any] = {}
    for key, value in filter.items():
        if key == "$or":
            translated[key] = [_to_mongo(clause) for clause in value]
        elif key == "id":
            translated["_id"] = value
        else:
            translated[key] = value
    return translated


def _from_mongo(document: Mapping[str, Any]) -> Record:
    record = {k: v for k, v in document.items() if k != "_id"}
    record["id"] = document["_id"]
    return record


class MongoRecordStore(BaseRecordStore):
    """Record store backed by a MongoDB database.

    Record ids are stored as the document ``_id``.
    """

    def __init__(self, uri: str, database: str) -> None:
        """Initialize the adapter.

        Args:
            uri: MongoDB connection URI.
            database: Database name.
        """
        self.uri = uri
        self.database = database
        self._client: AsyncIOMotorClient[Any] | None = None
        self._db: AsyncIOMotorDatabase[Any] | None = None

    async def connect(self) -> None:
        """Create the client, verify connectivity and ensure indexes."""
        self._client = AsyncIOMotorClient(
            self.uri,
            tz_aware=True,
            serverSelectionTimeoutMS=30000,
        )
        self._db = self._client[self.database]
        await self._client.admin.command("ping")

        for collection, keys, options in INDEXES:
            await self._db[collection].create_index(keys, **options)

        logger.info(
            "record_store_connected",
            backend="mongo",
            host=self.uri.split("@")[-1],
            database=self.database,
        )

    async def close(self) -> None:
        """Close the client."""
        if self._client is not None:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("record_store_disconnected", backend="mongo")

    @property
    def db(self) -> AsyncIOMotorDatabase[Any]:
        """The connected database."""
        if self._db is None:
            raise RuntimeError("Record store not connected")
        return self._db

    async def find(
        self,
        collection: str,
        filter: Filter | None = None,
        *,
        sort: str | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Record]:
        """Return records matching a filter."""
        cursor = self.db[collection].find(_to_mongo(filter))

        keys = [
            ("_id" if field == "id" else field, ASCENDING if direction > 0 else DESCENDING)
            for field, direction in parse_sort(sort)
        ]
        if keys:
            cursor = cursor.sort(keys)
        if skip:
            cursor = cursor.skip(skip)
        if limit is not None:
            cursor = cursor.limit(limit)

        return [_from_mongo(doc) async for doc in cursor]

    async def get_by_id(self, collection: str, record_id: str) -> Record | None:
        """Return a record by id regardless of its active flag."""
        document = await self.db[collection].find_one({"_id": record_id})
        return _from_mongo(document) if document else None

    async def insert_one(self, collection: str, document: Record) -> Record:
        """Insert a record and return it with its assigned id."""
        record = self._prepare_insert(document)
        stored = {k: v for k, v in record.items() if k != "id"}
        stored["_id"] = record["id"]
        try:
            await self.db[collection].insert_one(stored)
        except DuplicateKeyError as e:
            raise DuplicateRecordError(str(e)) from e
        return record

    async def update_by_id(
        self, collection: str, record_id: str, changes: Mapping[str, Any]
    ) -> Record | None:
        """Apply field changes to a record and return the updated record."""
        try:
            document = await self.db[collection].find_one_and_update(
                {"_id": record_id},
                {"$set": self._prepare_update(changes)},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise DuplicateRecordError(str(e)) from e
        return _from_mongo(document) if document else None

    async def count(self, collection: str, filter: Filter | None = None) -> int:
        """Count records matching a filter."""
        result: int = await self.db[collection].count_documents(_to_mongo(filter))
        return result
