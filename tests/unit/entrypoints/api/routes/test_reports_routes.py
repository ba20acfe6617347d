"""Tests for report routes."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from workasana.adapters.db import InMemoryRecordStore


@pytest.fixture
def tasks(seed: Callable[..., dict[str, Any]], signed_in: dict[str, Any]) -> None:
    """Two completed tasks and two open ones."""
    team = seed("teams", name="Core")
    now = datetime.now(UTC)
    seed("tasks", status="Completed", completed_at=now, team=team["id"], owners=[signed_in["id"]])
    seed("tasks", status="Completed", completed_at=now, team=None, owners=[signed_in["id"]])
    seed("tasks", status="To Do", time_to_complete=2, owners=[])
    seed("tasks", status="Blocked", time_to_complete=4, owners=[])


class TestReportRoutes:
    """Tests for /api/reports."""

    def test_requires_session(self, client: TestClient) -> None:
        """Reports are gated."""
        for path in ("last-week", "pending", "closed-tasks"):
            assert client.get(f"/api/reports/{path}").status_code == 403

    @pytest.mark.usefixtures("tasks")
    def test_last_week(self, client: TestClient) -> None:
        """Today's completions land in the last bucket."""
        response = client.get("/api/reports/last-week")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["totalCompleted"] == 2
        assert len(data["dailyStats"]) == 7
        assert list(data["dailyStats"].values())[-1] == 2
        assert len(data["tasks"]) == 2

    @pytest.mark.usefixtures("tasks")
    def test_pending(self, client: TestClient) -> None:
        """Pending rollup covers open tasks only."""
        data = client.get("/api/reports/pending").json()["data"]

        assert data["totalPendingTasks"] == 2
        assert data["totalPendingDays"] == 6
        assert data["averageDaysPerTask"] == 3
        assert data["statusStats"]["Blocked"] == {"count": 1, "totalDays": 4}

    @pytest.mark.usefixtures("tasks")
    def test_closed_tasks_grouping(self, client: TestClient) -> None:
        """groupBy selects the dimension; team is the default."""
        by_team = client.get("/api/reports/closed-tasks").json()["data"]
        assert by_team == {
            "groupBy": "team",
            "totalCompleted": 2,
            "stats": {"Core": 1, "Unassigned": 1},
        }

        by_owner = client.get("/api/reports/closed-tasks", params={"groupBy": "owner"})
        assert by_owner.json()["data"]["stats"] == {"Alice Example": 2}

        unknown = client.get("/api/reports/closed-tasks", params={"groupBy": "priority"})
        assert unknown.status_code == 200
        assert unknown.json()["data"]["stats"] == {}

    def test_store_failure_is_500(
        self,
        client: TestClient,
        signed_in: dict[str, Any],
        store: InMemoryRecordStore,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """A failing query yields a 500 with no partial data."""
        monkeypatch.setattr(store, "find", AsyncMock(side_effect=RuntimeError("down")))

        response = client.get("/api/reports/pending")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Error generating pending work report",
        }

    def test_malformed_task_is_500(
        self,
        client: TestClient,
        signed_in: dict[str, Any],
        seed: Callable[..., dict[str, Any]],
    ) -> None:
        """Errors raised while aggregating render as the JSON 500 body."""
        seed("tasks", time_to_complete=1, owners=[])

        response = client.get("/api/reports/pending")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Error generating pending work report",
        }

    def test_report_keys_follow_created_tasks(
        self,
        client: TestClient,
        signed_in: dict[str, Any],
        seed: Callable[..., dict[str, Any]],
    ) -> None:
        """Tasks created through the API feed the pending report."""
        team = seed("teams", name="Core")
        project = seed("projects", name="Alpha")
        response = client.post(
            "/api/tasks",
            json={
                "name": "Write docs",
                "project": project["id"],
                "team": team["id"],
                "owners": [signed_in["id"]],
                "timeToComplete": 2.5,
            },
        )
        assert response.status_code == 201

        data = client.get("/api/reports/pending").json()["data"]

        assert sorted(data) == [
            "averageDaysPerTask",
            "statusStats",
            "totalPendingDays",
            "totalPendingTasks",
        ]
        assert data["statusStats"] == {"To Do": {"count": 1, "totalDays": 2.5}}


class TestHealthAndFallbacks:
    """Tests for app-level routes and handlers."""

    def test_health(self, client: TestClient) -> None:
        """Health needs no session."""
        body = client.get("/api/health").json()

        assert body["success"] is True
        assert body["message"] == "Workasana API is running"
        assert datetime.fromisoformat(body["timestamp"])

    def test_unknown_route(self, client: TestClient) -> None:
        """Unmatched routes get the JSON 404."""
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Route not found"}

    def test_unknown_method(self, client: TestClient) -> None:
        """A known path with an unsupported method is also a 404."""
        response = client.get("/api/auth/logout")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Route not found"}

    def test_unexpected_error_is_500(
        self, client: TestClient, signed_in: dict[str, Any], store: InMemoryRecordStore
    ) -> None:
        """Unexpected store errors are translated, not leaked."""
        store.count = AsyncMock(side_effect=RuntimeError("boom"))  # type: ignore[method-assign]

        response = client.get("/api/tasks")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Error fetching tasks"}
