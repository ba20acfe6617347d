"""Dependency injection and application lifespan management."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from fastapi import Request

from workasana.adapters.auth import StoreUserRepository
from workasana.adapters.db import InMemoryRecordStore
from workasana.adapters.tracking import (
    ProjectsRepository,
    TagsRepository,
    TasksRepository,
    TeamsRepository,
)
from workasana.config import Settings
from workasana.core.auth import AuthService, TokenService
from workasana.core.interfaces import RecordStore
from workasana.core.reporting import ReportingEngine

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = structlog.get_logger()


def create_record_store(settings: Settings) -> RecordStore:
    """Build the record store selected by the settings."""
    if settings.record_store == "memory":
        return InMemoryRecordStore()

    from workasana.adapters.db.mongo import MongoRecordStore

    return MongoRecordStore(settings.mongodb_uri, settings.mongodb_database)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan - open and close the record store."""
    store: RecordStore = app.state.store
    await store.connect()
    logger.info("application_started")

    yield

    await store.close()
    logger.info("application_stopped")


def get_settings(request: Request) -> Settings:
    """Get the settings from app state."""
    settings: Settings = request.app.state.settings
    return settings


def get_record_store(request: Request) -> RecordStore:
    """Get the record store from app state."""
    store: RecordStore = request.app.state.store
    return store


def get_token_service(request: Request) -> TokenService:
    """Get the token service from app state."""
    tokens: TokenService = request.app.state.tokens
    return tokens


def get_user_repository(request: Request) -> StoreUserRepository:
    """Get a user repository bound to the record store."""
    return StoreUserRepository(get_record_store(request))


def get_auth_service(request: Request) -> AuthService:
    """Get auth service from request context."""
    return AuthService(get_user_repository(request), get_token_service(request))


def get_tasks_repository(request: Request) -> TasksRepository:
    """Get a tasks repository bound to the record store."""
    return TasksRepository(get_record_store(request))


def get_teams_repository(request: Request) -> TeamsRepository:
    """Get a teams repository bound to the record store."""
    return TeamsRepository(get_record_store(request))


def get_projects_repository(request: Request) -> ProjectsRepository:
    """Get a projects repository bound to the record store."""
    return ProjectsRepository(get_record_store(request))


def get_tags_repository(request: Request) -> TagsRepository:
    """Get a tags repository using the app-wide colour picker."""
    return TagsRepository(get_record_store(request), rng=request.app.state.tag_rng)


def get_reporting_engine(request: Request) -> ReportingEngine:
    """Get a reporting engine bound to the record store."""
    return ReportingEngine(get_record_store(request))
