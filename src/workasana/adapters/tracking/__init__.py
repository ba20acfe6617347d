"""Repositories for tracking resources."""

from workasana.adapters.tracking.tags_repository import TagsRepository
from workasana.adapters.tracking.tasks_repository import (
    TASK_REFERENCES,
    TasksRepository,
    build_task_filter,
)
from workasana.adapters.tracking.teams_repository import ProjectsRepository, TeamsRepository

__all__ = [
    "TASK_REFERENCES",
    "ProjectsRepository",
    "TagsRepository",
    "TasksRepository",
    "TeamsRepository",
    "build_task_filter",
]
