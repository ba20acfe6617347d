"""Report result types.

Field aliases are the names clients see; dump with ``by_alias=True``.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ReportGrouping(str, Enum):
    """Dimensions the closed-tasks report can group by."""

    TEAM = "team"
    OWNER = "owner"
    PROJECT = "project"


class LastWeekReport(BaseModel):
    """Completions over the trailing seven days, today included."""

    model_config = ConfigDict(populate_by_name=True)

    total_completed: int = Field(alias="totalCompleted")
    daily_stats: dict[str, int] = Field(alias="dailyStats")  # ISO date -> count, oldest first
    tasks: list[dict[str, Any]]


class StatusStats(BaseModel):
    """Workload for a single status."""

    model_config = ConfigDict(populate_by_name=True)

    count: int = 0
    total_days: float = Field(default=0.0, alias="totalDays")


class PendingReport(BaseModel):
    """Rollup of all tasks that are not completed."""

    model_config = ConfigDict(populate_by_name=True)

    total_pending_tasks: int = Field(alias="totalPendingTasks")
    total_pending_days: float = Field(alias="totalPendingDays")
    status_stats: dict[str, StatusStats] = Field(default_factory=dict, alias="statusStats")
    average_days_per_task: float = Field(alias="averageDaysPerTask")


class ClosedTasksReport(BaseModel):
    """Completed task counts grouped by a dimension."""

    model_config = ConfigDict(populate_by_name=True)

    group_by: str = Field(alias="groupBy")
    total_completed: int = Field(alias="totalCompleted")
    stats: dict[str, int]
