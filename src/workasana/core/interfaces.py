"""Protocol definitions for the record store.

The core domain only depends on these protocols, never on concrete
implementations. Adapters live under ``workasana.adapters.db``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

Record = dict[str, Any]
Filter = Mapping[str, Any]


@dataclass(frozen=True)
class Reference:
    """A read-time join from a record field to another collection.

    Attributes:
        field: Field on the source record holding an id or a list of ids.
        collection: Collection the ids point into.
        fields: Fields copied from the referenced record (``id`` is always kept).
    """

    field: str
    collection: str
    fields: tuple[str, ...] = ("name",)


@runtime_checkable
class RecordStore(Protocol):
    """Interface for the generic document store.

    Filters use a MongoDB-style subset: equality, ``$in``, ``$ne``,
    ``$gt``/``$gte``/``$lt``/``$lte``, ``$regex`` with ``$options`` and a
    top-level ``$or``. Sort specs are strings like ``"-created_at"``.
    """

    async def connect(self) -> None:
        """Open the underlying connection."""
        ...

    async def close(self) -> None:
        """Release the underlying connection."""
        ...

    async def find(
        self,
        collection: str,
        filter: Filter | None = None,
        *,
        sort: str | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Record]:
        """Return records matching a filter.

        Args:
            collection: Collection name.
            filter: Query filter.
            sort: Sort expression.
            skip: Number of matching records to skip.
            limit: Maximum number of records to return.

        Returns:
            Matching records, each with an ``id`` key.
        """
        ...

    async def find_one(self, collection: str, filter: Filter) -> Record | None:
        """Return the first record matching a filter."""
        ...

    async def get_by_id(self, collection: str, record_id: str) -> Record | None:
        """Return a record by id regardless of its active flag."""
        ...

    async def insert_one(self, collection: str, document: Record) -> Record:
        """Insert a record and return it with its assigned id."""
        ...

    async def update_by_id(
        self, collection: str, record_id: str, changes: Mapping[str, Any]
    ) -> Record | None:
        """Apply field changes to a record and return the updated record."""
        ...

    async def count(self, collection: str, filter: Filter | None = None) -> int:
        """Count records matching a filter."""
        ...

    async def resolve_references(
        self, records: Sequence[Record], references: Sequence[Reference]
    ) -> list[Record]:
        """Replace id fields with projections of the referenced records."""
        ...
