"""Task routes: filtered listing, CRUD and soft delete."""

from __future__ import annotations

import math
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from workasana.adapters.tracking import TasksRepository, build_task_filter
from workasana.core.exceptions import NotFound
from workasana.core.tracking import TaskCreate, TaskPriority, TaskStatus, TaskUpdate
from workasana.entrypoints.api.deps import get_tasks_repository
from workasana.entrypoints.api.errors import translate_errors
from workasana.entrypoints.api.middleware.jwt_auth import SessionDep
from workasana.entrypoints.api.wire import sort_from_wire, to_wire

router = APIRouter(prefix="/tasks", tags=["tasks"])

TasksDep = Annotated[TasksRepository, Depends(get_tasks_repository)]


@router.get("")
async def list_tasks(
    session: SessionDep,
    tasks: TasksDep,
    team: str | None = None,
    owner: str | None = None,
    project: str | None = None,
    status: TaskStatus | None = None,
    priority: TaskPriority | None = None,
    tags: str | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    sort: str = "-createdAt",
) -> dict[str, Any]:
    """List active tasks with optional filters and pagination."""
    filter = build_task_filter(
        team=team,
        owner=owner,
        project=project,
        status=status.value if status else None,
        priority=priority.value if priority else None,
        tags=tags,
    )
    with translate_errors("Error fetching tasks"):
        rows, total = await tasks.list(filter, page=page, limit=limit, sort=sort_from_wire(sort))

    return {
        "success": True,
        "count": len(rows),
        "total": total,
        "page": page,
        "totalPages": math.ceil(total / limit),
        "data": to_wire(rows),
    }


@router.get("/{task_id}")
async def get_task(task_id: str, session: SessionDep, tasks: TasksDep) -> dict[str, Any]:
    """Get a single active task."""
    with translate_errors("Error fetching task"):
        task = await tasks.get_active(task_id)
        if task is None:
            raise NotFound("Task not found")
    return {"success": True, "data": to_wire(task)}


@router.post("", status_code=201)
async def create_task(body: TaskCreate, session: SessionDep, tasks: TasksDep) -> dict[str, Any]:
    """Create a task owned by the caller's session."""
    with translate_errors("Error creating task"):
        created = await tasks.create(body, created_by=session.user_id)
        task = await tasks.get_active(created["id"])
    return {"success": True, "message": "Task created successfully", "data": to_wire(task)}


@router.put("/{task_id}")
async def update_task(
    task_id: str, body: TaskUpdate, session: SessionDep, tasks: TasksDep
) -> dict[str, Any]:
    """Update an active task."""
    with translate_errors("Error updating task"):
        updated = await tasks.update(task_id, body)
        if updated is None:
            raise NotFound("Task not found")
        task = await tasks.get_active(task_id)
    return {"success": True, "message": "Task updated successfully", "data": to_wire(task)}


@router.delete("/{task_id}")
async def delete_task(task_id: str, session: SessionDep, tasks: TasksDep) -> dict[str, Any]:
    """Soft delete an active task."""
    with translate_errors("Error deleting task"):
        if not await tasks.soft_delete(task_id):
            raise NotFound("Task not found")
    return {"success": True, "message": "Task deleted successfully"}
