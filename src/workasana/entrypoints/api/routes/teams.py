"""Team and project routes."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, status

from workasana.adapters.tracking import ProjectsRepository, TeamsRepository
from workasana.core.tracking import ProjectCreate, TeamCreate
from workasana.entrypoints.api.deps import get_projects_repository, get_teams_repository
from workasana.entrypoints.api.errors import translate_errors
from workasana.entrypoints.api.middleware.jwt_auth import SessionDep
from workasana.entrypoints.api.wire import to_wire

teams_router = APIRouter(prefix="/teams", tags=["teams"])
projects_router = APIRouter(prefix="/projects", tags=["projects"])

TeamsDep = Annotated[TeamsRepository, Depends(get_teams_repository)]
ProjectsDep = Annotated[ProjectsRepository, Depends(get_projects_repository)]


@teams_router.get("")
async def list_teams(session: SessionDep, teams: TeamsDep) -> dict[str, Any]:
    """List active teams."""
    with translate_errors("Error fetching teams"):
        rows = await teams.list_active()
    return {"success": True, "count": len(rows), "data": to_wire(rows)}


@teams_router.post("", status_code=status.HTTP_201_CREATED)
async def create_team(body: TeamCreate, session: SessionDep, teams: TeamsDep) -> dict[str, Any]:
    """Create a team."""
    with translate_errors("Error creating team"):
        team = await teams.create(body)
    return {"success": True, "message": "Team created successfully", "data": to_wire(team)}


@projects_router.get("")
async def list_projects(session: SessionDep, projects: ProjectsDep) -> dict[str, Any]:
    """List active projects, newest first."""
    with translate_errors("Error fetching projects"):
        rows = await projects.list_active()
    return {"success": True, "count": len(rows), "data": to_wire(rows)}


@projects_router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(
    body: ProjectCreate, session: SessionDep, projects: ProjectsDep
) -> dict[str, Any]:
    """Create a project."""
    with translate_errors("Error creating project"):
        project = await projects.create(body)
    return {"success": True, "message": "Project created successfully", "data": to_wire(project)}
