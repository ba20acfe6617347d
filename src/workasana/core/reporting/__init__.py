"""Reporting over the task collection."""

from workasana.core.reporting.engine import ReportGenerationError, ReportingEngine
from workasana.core.reporting.types import (
    ClosedTasksReport,
    LastWeekReport,
    PendingReport,
    ReportGrouping,
    StatusStats,
)

__all__ = [
    "ClosedTasksReport",
    "LastWeekReport",
    "PendingReport",
    "ReportGenerationError",
    "ReportGrouping",
    "ReportingEngine",
    "StatusStats",
]
