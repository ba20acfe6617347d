"""FastAPI application definition."""

from __future__ import annotations

import random
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from workasana.config import Settings
from workasana.core.auth import TokenService
from workasana.core.interfaces import RecordStore

from .deps import create_record_store, lifespan
from .errors import install_error_handlers
from .routes import api_router


def create_app(
    settings: Settings,
    store: RecordStore | None = None,
    tag_rng: random.Random | None = None,
) -> FastAPI:
    """Build the application.

    Args:
        settings: Process-wide configuration.
        store: Record store to use instead of the one selected by settings.
        tag_rng: Random source for tag palette colours.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="workasana",
        description="Task tracking with teams, projects, tags and reports",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.state.settings = settings
    app.state.store = store if store is not None else create_record_store(settings)
    app.state.tokens = TokenService(
        access_secret=settings.access_token_secret,
        refresh_secret=settings.refresh_token_secret,
    )
    app.state.tag_rng = tag_rng or random.Random()

    # CORS middleware for the separately hosted frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_error_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/api/health")
    async def health_check() -> dict[str, Any]:
        """Liveness check."""
        return {
            "success": True,
            "message": "Workasana API is running",
            "timestamp": datetime.now(UTC).isoformat(),
        }

    return app
