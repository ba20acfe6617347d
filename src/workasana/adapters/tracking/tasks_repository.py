"""Tasks repository."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

import structlog

from workasana.adapters.db.base import utcnow
from workasana.core.interfaces import Record, RecordStore, Reference
from workasana.core.tracking import TaskCreate, TaskUpdate, apply_completion

logger = structlog.get_logger()

TASKS = "tasks"

TASK_REFERENCES = (
    Reference("project", "projects", ("name", "description")),
    Reference("team", "teams", ("name",)),
    Reference("owners", "users", ("name", "email")),
    Reference("tags", "tags", ("name", "color")),
    Reference("created_by", "users", ("name", "email")),
)


def build_task_filter(
    team: str | None = None,
    owner: str | None = None,
    project: str | None = None,
    status: str | None = None,
    priority: str | None = None,
    tags: str | list[str] | None = None,
) -> dict[str, Any]:
    """Build the store filter for a task listing.

    Args:
        team: Team id.
        owner: User id that must be among the owners.
        project: Project id.
        status: Exact status.
        priority: Exact priority.
        tags: Tag ids, as a list or a comma-separated string; any match.

    Returns:
        Filter restricted to active tasks.
    """
    filter: dict[str, Any] = {"is_active": True}
    if team:
        filter["team"] = team
    if owner:
        filter["owners"] = {"$in": [owner]}
    if project:
        filter["project"] = project
    if status:
        filter["status"] = status
    if priority:
        filter["priority"] = priority
    if tags:
        tag_ids = tags if isinstance(tags, list) else tags.split(",")
        filter["tags"] = {"$in": [t.strip() for t in tag_ids if t.strip()]}
    return filter


class TasksRepository:
    """Repository for task operations."""

    def __init__(
        self,
        store: RecordStore,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize the repository.

        Args:
            store: Record store.
            clock: Source of the write time used for completion stamps.
        """
        self._store = store
        self._clock = clock

    async def list(
        self,
        filter: dict[str, Any],
        page: int = 1,
        limit: int = 10,
        sort: str = "-created_at",
    ) -> tuple[list[Record], int]:
        """List one page of tasks with references resolved.

        Returns:
            The page of tasks and the total number of matching tasks.
        """
        rows = await self._store.find(
            TASKS,
            filter,
            sort=sort,
            skip=(page - 1) * limit,
            limit=limit,
        )
        total = await self._store.count(TASKS, filter)
        return await self._store.resolve_references(rows, TASK_REFERENCES), total

    async def get_active(self, task_id: str) -> Record | None:
        """Get an active task by id with references resolved."""
        row = await self._store.get_by_id(TASKS, task_id)
        if not row or not row.get("is_active", True):
            return None
        resolved = await self._store.resolve_references([row], TASK_REFERENCES)
        return resolved[0]

    async def create(self, data: TaskCreate, created_by: str) -> Record:
        """Create a task, deriving ``completed_at`` from its status."""
        changes = apply_completion(data.model_dump(), None, self._clock())
        row = await self._store.insert_one(TASKS, {**changes, "created_by": created_by})
        logger.info("task_created", task_id=row["id"], status=row["status"])
        return row

    async def update(self, task_id: str, data: TaskUpdate) -> Record | None:
        """Apply an update to an active task.

        Returns:
            The updated task, or None if no active task has this id.
        """
        current = await self._store.get_by_id(TASKS, task_id)
        if not current or not current.get("is_active", True):
            return None

        changes = apply_completion(data.changes(), current, self._clock())
        row = await self._store.update_by_id(TASKS, task_id, changes)
        logger.info("task_updated", task_id=task_id, fields=sorted(changes))
        return row

    async def soft_delete(self, task_id: str) -> bool:
        """Mark an active task inactive.

        Returns:
            True if a task was deactivated.
        """
        current = await self._store.get_by_id(TASKS, task_id)
        if not current or not current.get("is_active", True):
            return False
        await self._store.update_by_id(TASKS, task_id, {"is_active": False})
        logger.info("task_deleted", task_id=task_id)
        return True
