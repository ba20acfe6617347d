"""Shared behaviour for record store adapters."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from workasana.core.interfaces import Filter, Record, Reference


class DuplicateRecordError(Exception):
    """Raised when an insert or update violates a unique index."""

    pass


def new_record_id() -> str:
    """Generate a new record identifier."""
    return uuid4().hex


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def parse_sort(sort: str | None) -> list[tuple[str, int]]:
    """Parse a sort expression into ``(field, direction)`` pairs.

    ``"-created_at"`` sorts descending, ``"name"`` ascending. Several keys may
    be separated by commas or whitespace.

    Args:
        sort: Sort expression.

    Returns:
        List of ``(field, 1 | -1)`` pairs, empty when no sort is given.
    """
    if not sort:
        return []
    keys = []
    for token in re.split(r"[,\s]+", sort.strip()):
        if not token:
            continue
        if token.startswith("-"):
            keys.append((token[1:], -1))
        else:
            keys.append((token.lstrip("+"), 1))
    return keys


def _referenced_ids(records: Sequence[Record], field: str) -> list[str]:
    ids: list[str] = []
    for record in records:
        value = record.get(field)
        if isinstance(value, list):
            ids.extend(v for v in value if v is not None)
        elif value is not None:
            ids.append(value)
    return list(dict.fromkeys(ids))


class BaseRecordStore:
    """Base class implementing store-independent operations.

    Subclasses provide ``find`` and the write operations; reference
    resolution is built on top of ``find``.
    """

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
        raise NotImplementedError

    async def find_one(self, collection: str, filter: Filter) -> Record | None:
        """Return the first record matching a filter."""
        records = await self.find(collection, filter, limit=1)
        return records[0] if records else None

    def _prepare_insert(self, document: Mapping[str, Any]) -> Record:
        """Stamp id, active flag and timestamps on a new record."""
        now = utcnow()
        record = dict(document)
        record["id"] = record.get("id") or new_record_id()
        record.setdefault("is_active", True)
        record["created_at"] = now
        record["updated_at"] = now
        return record

    def _prepare_update(self, changes: Mapping[str, Any]) -> Record:
        """Stamp the update time on a change set."""
        prepared = {k: v for k, v in changes.items() if k not in ("id", "created_at")}
        prepared["updated_at"] = utcnow()
        return prepared

    async def resolve_references(
        self, records: Sequence[Record], references: Sequence[Reference]
    ) -> list[Record]:
        """Replace id fields with projections of the referenced records.

        Scalar fields resolve to the projected record or ``None`` when it no
        longer exists; list fields resolve to the projected records that
        exist, in their original order.

        Args:
            records: Records to resolve.
            references: Joins to perform.

        Returns:
            New records with reference fields replaced.
        """
        resolved = [dict(record) for record in records]

        for ref in references:
            ids = _referenced_ids(resolved, ref.field)
            if not ids:
                lookup: dict[str, Record] = {}
            else:
                targets = await self.find(ref.collection, {"id": {"$in": ids}})
                lookup = {
                    t["id"]: {"id": t["id"], **{f: t.get(f) for f in ref.fields}}
                    for t in targets
                }

            for record in resolved:
                value = record.get(ref.field)
                if isinstance(value, list):
                    record[ref.field] = [lookup[v] for v in value if v in lookup]
                elif value is not None:
                    record[ref.field] = lookup.get(value)

        return resolved
