"""Record store adapters."""

from workasana.adapters.db.base import DuplicateRecordError, new_record_id, parse_sort
from workasana.adapters.db.memory import InMemoryRecordStore

__all__ = [
    "DuplicateRecordError",
    "InMemoryRecordStore",
    "new_record_id",
    "parse_sort",
]
