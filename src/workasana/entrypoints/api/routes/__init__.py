"""API route modules."""

from fastapi import APIRouter

from workasana.entrypoints.api.routes.auth import router as auth_router
from workasana.entrypoints.api.routes.reports import router as reports_router
from workasana.entrypoints.api.routes.tags import router as tags_router
from workasana.entrypoints.api.routes.tasks import router as tasks_router
from workasana.entrypoints.api.routes.teams import projects_router, teams_router
from workasana.entrypoints.api.routes.users import router as users_router

# Create main API router
api_router = APIRouter()

# Include all route modules
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(tasks_router)
api_router.include_router(teams_router)
api_router.include_router(projects_router)
api_router.include_router(tags_router)
api_router.include_router(reports_router)

__all__ = ["api_router"]
