"""Reporting engine computing derived views over the task collection.

All three reports read only active tasks. A failing store query aborts
the whole report with ``ReportGenerationError``; partial results are
never returned.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from datetime import UTC, datetime, time, timedelta
from typing import Any

import structlog

from workasana.core.exceptions import InternalFailure
from workasana.core.interfaces import Record, RecordStore, Reference
from workasana.core.reporting.types import (
    ClosedTasksReport,
    LastWeekReport,
    PendingReport,
    ReportGrouping,
    StatusStats,
)
from workasana.core.tracking import TaskStatus

logger = structlog.get_logger()

TASKS = "tasks"
WINDOW_DAYS = 7
UNASSIGNED = "Unassigned"

REPORT_REFERENCES = (
    Reference("project", "projects", ("name",)),
    Reference("team", "teams", ("name",)),
    Reference("owners", "users", ("name",)),
)


class ReportGenerationError(InternalFailure):
    """A report could not be computed."""

    pass


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ReportingEngine:
    """Computes completion histograms, workload rollups and grouped counts."""

    def __init__(
        self,
        store: RecordStore,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the engine.

        Args:
            store: Record store holding the task collection.
            clock: Returns the current aware datetime; its timezone defines
                day boundaries.
        """
        self._store = store
        self._clock = clock

    async def _load(self, filter: dict[str, Any], report: str, message: str) -> list[Record]:
        try:
            rows = await self._store.find(TASKS, {**filter, "is_active": True})
            return await self._store.resolve_references(rows, REPORT_REFERENCES)
        except Exception as e:
            logger.exception("report_generation_failed", report=report)
            raise ReportGenerationError(message) from e

    async def last_week(self) -> LastWeekReport:
        """Daily completion counts for today and the six days before it."""
        now = self._clock()
        tz = now.tzinfo or UTC
        today = now.date()
        first_day = today - timedelta(days=WINDOW_DAYS - 1)

        window_start = datetime.combine(first_day, time.min, tzinfo=tz)
        window_end = datetime.combine(today, time.max, tzinfo=tz)

        tasks = await self._load(
            {
                "status": TaskStatus.COMPLETED.value,
                "completed_at": {"$gte": window_start, "$lte": window_end},
            },
            report="last_week",
            message="Error generating last week report",
        )

        daily_stats = {
            (first_day + timedelta(days=offset)).isoformat(): 0 for offset in range(WINDOW_DAYS)
        }
        for task in tasks:
            completed_at: datetime = task["completed_at"]
            if completed_at.tzinfo is None:
                completed_at = completed_at.replace(tzinfo=UTC)
            key = completed_at.astimezone(tz).date().isoformat()
            if key in daily_stats:
                daily_stats[key] += 1

        return LastWeekReport(total_completed=len(tasks), daily_stats=daily_stats, tasks=tasks)

    async def pending(self) -> PendingReport:
        """Count and effort of every task that is not completed."""
        tasks = await self._load(
            {"status": {"$ne": TaskStatus.COMPLETED.value}},
            report="pending",
            message="Error generating pending work report",
        )

        total_days = 0.0
        status_stats: dict[str, StatusStats] = {}
        for task in tasks:
            days = float(task.get("time_to_complete") or 0)
            total_days += days
            stats = status_stats.setdefault(task["status"], StatusStats())
            stats.count += 1
            stats.total_days += days

        count = len(tasks)
        return PendingReport(
            total_pending_tasks=count,
            total_pending_days=total_days,
            status_stats=status_stats,
            average_days_per_task=total_days / count if count > 0 else 0,
        )

    async def closed_tasks(self, group_by: str = ReportGrouping.TEAM.value) -> ClosedTasksReport:
        """Completed task counts grouped by team, owner or project.

        A task with several owners counts once for each owner. Unsupported
        ``group_by`` values produce an empty grouping rather than an error.
        """
        tasks = await self._load(
            {"status": TaskStatus.COMPLETED.value},
            report="closed_tasks",
            message="Error generating closed tasks report",
        )

        stats: Counter[str] = Counter()
        if group_by in (ReportGrouping.TEAM.value, ReportGrouping.PROJECT.value):
            for task in tasks:
                reference = task.get(group_by)
                stats[(reference or {}).get("name") or UNASSIGNED] += 1
        elif group_by == ReportGrouping.OWNER.value:
            for task in tasks:
                for owner in task.get("owners") or []:
                    stats[owner.get("name") or owner["id"]] += 1
        else:
            logger.info("unsupported_report_grouping", group_by=group_by)

        return ClosedTasksReport(
            group_by=group_by,
            total_completed=len(tasks),
            stats=dict(stats),
        )
