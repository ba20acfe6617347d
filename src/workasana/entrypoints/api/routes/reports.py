"""Report routes."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from workasana.core.reporting import ReportGrouping, ReportingEngine
from workasana.entrypoints.api.deps import get_reporting_engine
from workasana.entrypoints.api.errors import translate_errors
from workasana.entrypoints.api.middleware.jwt_auth import SessionDep
from workasana.entrypoints.api.wire import to_wire

router = APIRouter(prefix="/reports", tags=["reports"])

EngineDep = Annotated[ReportingEngine, Depends(get_reporting_engine)]


@router.get("/last-week")
async def last_week_report(session: SessionDep, engine: EngineDep) -> dict[str, Any]:
    """Tasks completed today and in the six days before."""
    with translate_errors("Error generating last week report"):
        report = await engine.last_week()
    data = report.model_dump(by_alias=True)
    data["tasks"] = to_wire(report.tasks)
    return {"success": True, "data": data}


@router.get("/pending")
async def pending_report(session: SessionDep, engine: EngineDep) -> dict[str, Any]:
    """Workload rollup of tasks not yet completed."""
    with translate_errors("Error generating pending work report"):
        report = await engine.pending()
    return {"success": True, "data": report.model_dump(by_alias=True)}


@router.get("/closed-tasks")
async def closed_tasks_report(
    session: SessionDep,
    engine: EngineDep,
    group_by: Annotated[str, Query(alias="groupBy")] = ReportGrouping.TEAM.value,
) -> dict[str, Any]:
    """Completed task counts grouped by team, owner or project."""
    with translate_errors("Error generating closed tasks report"):
        report = await engine.closed_tasks(group_by)
    return {"success": True, "data": report.model_dump(by_alias=True)}
