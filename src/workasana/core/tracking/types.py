"""Tracking domain types: tasks, teams, projects and tags."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

HEX_COLOR_PATTERN = r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$"

TAG_PALETTE: tuple[str, ...] = (
    "#3b82f6",
    "#ef4444",
    "#10b981",
    "#f59e0b",
    "#8b5cf6",
    "#06b6d4",
    "#84cc16",
    "#f97316",
    "#ec4899",
    "#6366f1",
    "#14b8a6",
    "#eab308",
)


class TaskStatus(str, Enum):
    """Task workflow states."""

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    BLOCKED = "Blocked"


class TaskPriority(str, Enum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ProjectStatus(str, Enum):
    """Project lifecycle states."""

    PLANNING = "planning"
    ACTIVE = "active"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"


def _strip(value: str) -> str:
    return value.strip() if isinstance(value, str) else value


class TaskCreate(BaseModel):
    """Fields accepted when creating a task."""

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True)

    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    project: str = Field(min_length=1)
    team: str = Field(min_length=1)
    owners: list[str] = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    time_to_complete: float = Field(ge=0.1, alias="timeToComplete")
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: datetime | None = Field(default=None, alias="dueDate")

    strip_text = field_validator("name", "description", mode="before")(_strip)


class TaskUpdate(BaseModel):
    """Fields accepted when updating a task. Unset fields are left alone."""

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True)

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    project: str | None = Field(default=None, min_length=1)
    team: str | None = Field(default=None, min_length=1)
    owners: list[str] | None = Field(default=None, min_length=1)
    tags: list[str] | None = None
    time_to_complete: float | None = Field(default=None, ge=0.1, alias="timeToComplete")
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    due_date: datetime | None = Field(default=None, alias="dueDate")

    strip_text = field_validator("name", "description", mode="before")(_strip)

    def changes(self) -> dict[str, Any]:
        """Fields explicitly set by the caller.

        Only ``description`` and ``due_date`` may be cleared with null;
        nulls for required fields are ignored.
        """
        return {
            k: v
            for k, v in self.model_dump(exclude_unset=True).items()
            if v is not None or k in ("description", "due_date")
        }


class TeamCreate(BaseModel):
    """Fields accepted when creating a team."""

    name: str = Field(min_length=1, max_length=50)
    description: str | None = None
    members: list[str] = Field(default_factory=list)

    strip_text = field_validator("name", mode="before")(_strip)


class ProjectCreate(BaseModel):
    """Fields accepted when creating a project."""

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True)

    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    team: str | None = None
    status: ProjectStatus = ProjectStatus.PLANNING
    start_date: datetime | None = Field(default=None, alias="startDate")
    end_date: datetime | None = Field(default=None, alias="endDate")

    strip_text = field_validator("name", "description", mode="before")(_strip)


class TagCreate(BaseModel):
    """Fields accepted when creating a tag."""

    name: str = Field(min_length=1, max_length=30)
    color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)

    strip_text = field_validator("name", mode="before")(_strip)
