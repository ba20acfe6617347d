"""Tracking domain: tasks and their supporting reference entities."""

from workasana.core.tracking.lifecycle import apply_completion
from workasana.core.tracking.types import (
    HEX_COLOR_PATTERN,
    TAG_PALETTE,
    ProjectCreate,
    ProjectStatus,
    TagCreate,
    TaskCreate,
    TaskPriority,
    TaskStatus,
    TaskUpdate,
    TeamCreate,
)

__all__ = [
    "HEX_COLOR_PATTERN",
    "TAG_PALETTE",
    "ProjectCreate",
    "ProjectStatus",
    "TagCreate",
    "TaskCreate",
    "TaskPriority",
    "TaskStatus",
    "TaskUpdate",
    "TeamCreate",
    "apply_completion",
]
