"""Task completion bookkeeping.

``completed_at`` is set exactly when ``status`` is Completed. Moving into
Completed stamps the write time unless a timestamp is already present;
moving anywhere else clears it.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from workasana.core.tracking.types import TaskStatus


def _status_value(status: Any) -> Any:
    return status.value if isinstance(status, TaskStatus) else status


def apply_completion(
    changes: Mapping[str, Any],
    current: Mapping[str, Any] | None,
    now: datetime,
) -> dict[str, Any]:
    """Return ``changes`` with ``completed_at`` consistent with the status.

    Args:
        changes: Field changes about to be written. Any ``completed_at`` in
            here is discarded; it is derived, never client-supplied.
        current: The stored task for updates, ``None`` for creates.
        now: Write time.

    Returns:
        New change set including the derived ``completed_at`` when the
        status is part of the write.
    """
    result = {k: v for k, v in changes.items() if k != "completed_at"}

    if "status" not in result:
        return result

    status = _status_value(result["status"])
    if status == TaskStatus.COMPLETED.value:
        existing = current.get("completed_at") if current else None
        still_completed = current is not None and current.get("status") == status
        result["completed_at"] = existing if (existing and still_completed) else now
    else:
        result["completed_at"] = None
    return result
