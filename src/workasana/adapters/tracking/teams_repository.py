"""Teams and projects repositories."""

from __future__ import annotations

import structlog

from workasana.core.interfaces import Record, RecordStore, Reference
from workasana.core.tracking import ProjectCreate, TeamCreate

logger = structlog.get_logger()

TEAMS = "teams"
PROJECTS = "projects"


class TeamsRepository:
    """Repository for team operations."""

    def __init__(self, store: RecordStore) -> None:
        """Initialize the repository."""
        self._store = store

    async def list_active(self) -> list[Record]:
        """List active teams sorted by name, with members resolved."""
        rows = await self._store.find(TEAMS, {"is_active": True}, sort="name")
        return await self._store.resolve_references(
            rows, [Reference("members", "users", ("name", "email"))]
        )

    async def create(self, data: TeamCreate) -> Record:
        """Create a new team."""
        row = await self._store.insert_one(TEAMS, data.model_dump())
        logger.info("team_created", team_id=row["id"])
        return row


class ProjectsRepository:
    """Repository for project operations."""

    def __init__(self, store: RecordStore) -> None:
        """Initialize the repository."""
        self._store = store

    async def list_active(self) -> list[Record]:
        """List active projects newest first, with team resolved."""
        rows = await self._store.find(PROJECTS, {"is_active": True}, sort="-created_at")
        return await self._store.resolve_references(
            rows, [Reference("team", TEAMS, ("name", "description"))]
        )

    async def create(self, data: ProjectCreate) -> Record:
        """Create a new project."""
        row = await self._store.insert_one(PROJECTS, data.model_dump())
        logger.info("project_created", project_id=row["id"])
        return row
