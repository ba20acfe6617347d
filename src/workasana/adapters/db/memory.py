"""In-memory record store for development and testing."""

from __future__ import annotations

import copy
import re
from collections.abc import Mapping
from typing import Any

import structlog

from workasana.adapters.db.base import BaseRecordStore, parse_sort
from workasana.core.interfaces import Filter, Record

logger = structlog.get_logger()

_COMPARISONS = {
    "$gt": lambda value, operand: value > operand,
    "$gte": lambda value, operand: value >= operand,
    "$lt": lambda value, operand: value < operand,
    "$lte": lambda value, operand: value <= operand,
}


def _equals(value: Any, operand: Any) -> bool:
    # Scalar equality against an array field matches membership.
    if isinstance(value, list) and not isinstance(operand, list):
        return operand in value
    return bool(value == operand)


def _matches_condition(value: Any, condition: Mapping[str, Any]) -> bool:
    for op, operand in condition.items():
        if op == "$in":
            if isinstance(value, list):
                if not any(v in operand for v in value):
                    return False
            elif value not in operand:
                return False
        elif op == "$ne":
            if _equals(value, operand):
                return False
        elif op in _COMPARISONS:
            if value is None or not _COMPARISONS[op](value, operand):
                return False
        elif op == "$regex":
            flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
            if value is None or not re.search(operand, str(value), flags):
                return False
        elif op == "$options":
            continue
        else:
            raise ValueError(f"Unsupported filter operator: {op}")
    return True


def matches(record: Record, filter: Filter | None) -> bool:
    """Check whether a record satisfies a MongoDB-style filter.

    Args:
        record: Record to test.
        filter: Filter to evaluate.

    Returns:
        True if every clause matches.
    """
    if not filter:
        return True

    for key, condition in filter.items():
        if key == "$or":
            if not any(matches(record, clause) for clause in condition):
                return False
            continue

        value = record.get(key)
        is_operator = isinstance(condition, Mapping) and any(
            str(k).startswith("$") for k in condition
        )
        if is_operator:
            if not _matches_condition(value, condition):
                return False
        elif not _equals(value, condition):
            return False
    return True


class InMemoryRecordStore(BaseRecordStore):
    """Record store keeping collections in process memory.

    Records are deep-copied on the way in and out so callers never share
    mutable state with the store.

    Attributes:
        collections: Map of collection name to ``{id: record}``.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self.collections: dict[str, dict[str, Record]] = {}

    async def connect(self) -> None:
        """No-op for the in-memory store."""
        logger.info("record_store_connected", backend="memory")

    async def close(self) -> None:
        """No-op for the in-memory store."""
        pass

    def _collection(self, name: str) -> dict[str, Record]:
        return self.collections.setdefault(name, {})

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
        results = [r for r in self._collection(collection).values() if matches(r, filter)]

        # Stable sort applied from the least significant key; None sorts lowest.
        for field, direction in reversed(parse_sort(sort)):
            results.sort(
                key=lambda r, f=field: (r.get(f) is not None, r.get(f)),
                reverse=direction < 0,
            )

        if skip:
            results = results[skip:]
        if limit is not None:
            results = results[:limit]
        return copy.deepcopy(results)

    async def get_by_id(self, collection: str, record_id: str) -> Record | None:
        """Return a record by id regardless of its active flag."""
        record = self._collection(collection).get(record_id)
        return copy.deepcopy(record) if record is not None else None

    async def insert_one(self, collection: str, document: Record) -> Record:
        """Insert a record and return it with its assigned id."""
        record = self._prepare_insert(copy.deepcopy(document))
        self._collection(collection)[record["id"]] = record
        return copy.deepcopy(record)

    async def update_by_id(
        self, collection: str, record_id: str, changes: Mapping[str, Any]
    ) -> Record | None:
        """Apply field changes to a record and return the updated record."""
        record = self._collection(collection).get(record_id)
        if record is None:
            return None
        record.update(copy.deepcopy(self._prepare_update(changes)))
        return copy.deepcopy(record)

    async def count(self, collection: str, filter: Filter | None = None) -> int:
        """Count records matching a filter."""
        return sum(1 for r in self._collection(collection).values() if matches(r, filter))
