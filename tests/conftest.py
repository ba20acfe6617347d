"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator
from datetime import UTC, datetime
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from workasana.adapters.db import InMemoryRecordStore, new_record_id
from workasana.config import Settings
from workasana.core.auth import TokenService, User
from workasana.entrypoints.api.app import create_app

ACCESS_SECRET = "test-access-secret"  # pragma: allowlist secret
REFRESH_SECRET = "test-refresh-secret"  # pragma: allowlist secret


@pytest.fixture
def anyio_backend() -> str:
    """Configure anyio to use asyncio backend."""
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    """Settings for an in-memory application."""
    return Settings(
        access_token_secret=ACCESS_SECRET,
        refresh_token_secret=REFRESH_SECRET,
        record_store="memory",
    )


@pytest.fixture
def token_service() -> TokenService:
    """Token service with the test secrets."""
    return TokenService(access_secret=ACCESS_SECRET, refresh_secret=REFRESH_SECRET)


@pytest.fixture
def sample_user() -> User:
    """An active user without a password hash."""
    return User(
        id=new_record_id(),
        username="alice",
        name="Alice Example",
        email="alice@example.com",
        is_active=True,
        created_at=datetime.now(UTC),
    )


@pytest.fixture
def store() -> InMemoryRecordStore:
    """Empty in-memory record store."""
    return InMemoryRecordStore()


@pytest.fixture
def seed(store: InMemoryRecordStore) -> Callable[..., dict[str, Any]]:
    """Insert a record straight into the store, bypassing the API."""

    def _seed(collection: str, **fields: Any) -> dict[str, Any]:
        now = datetime.now(UTC)
        record = {
            "id": new_record_id(),
            "is_active": True,
            "created_at": now,
            "updated_at": now,
            **fields,
        }
        store.collections.setdefault(collection, {})[record["id"]] = record
        return record

    return _seed


@pytest.fixture
def app(settings: Settings, store: InMemoryRecordStore) -> FastAPI:
    """Application wired to the in-memory store."""
    return create_app(settings, store=store, tag_rng=random.Random(7))


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Test client over https so secure session cookies round-trip."""
    with TestClient(app, base_url="https://testserver") as test_client:
        yield test_client


@pytest.fixture
def signed_in(client: TestClient) -> dict[str, Any]:
    """Register a user through the API; the client keeps the session cookies."""
    response = client.post(
        "/api/auth/register",
        json={
            "username": "alice",
            "name": "Alice Example",
            "email": "alice@example.com",
            "password": "correct-horse",  # pragma: allowlist secret
        },
    )
    assert response.status_code == 201
    user: dict[str, Any] = response.json()["user"]
    return user
