"""Wire format for API payloads.

Records are stored with snake_case field names; clients see camelCase.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic.alias_generators import to_camel, to_snake


def to_wire(value: Any) -> Any:
    """Rename record fields to camelCase, recursing into nested records.

    Only use on records and lists of records: every dict key is treated as
    a field name.
    """
    if isinstance(value, dict):
        return {to_camel(key): to_wire(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_wire(item) for item in value]
    return value


def sort_from_wire(sort: str) -> str:
    """Translate a client sort expression such as ``-createdAt`` to field names."""
    keys = []
    for part in re.split(r"[,\s]+", sort.strip()):
        if not part:
            continue
        direction = "-" if part.startswith("-") else ""
        keys.append(direction + to_snake(part.lstrip("-+")))
    return ",".join(keys)
