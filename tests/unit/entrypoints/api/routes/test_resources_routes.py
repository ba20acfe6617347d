"""Tests for team, project, tag and user routes."""

from collections.abc import Callable
from typing import Any

from fastapi.testclient import TestClient

from workasana.core.tracking import TAG_PALETTE


class TestTeamAndProjectRoutes:
    """Tests for /api/teams and /api/projects."""

    def test_requires_session(self, client: TestClient) -> None:
        """Both resources are gated."""
        assert client.get("/api/teams").status_code == 403
        assert client.get("/api/projects").status_code == 403

    def test_teams_sorted_with_members(
        self, client: TestClient, signed_in: dict[str, Any]
    ) -> None:
        """Teams list by name with members resolved."""
        client.post("/api/teams", json={"name": "Web", "members": [signed_in["id"]]})
        created = client.post("/api/teams", json={"name": "Core", "description": "Backend"})
        assert created.status_code == 201

        teams = client.get("/api/teams").json()

        assert [t["name"] for t in teams["data"]] == ["Core", "Web"]
        assert teams["data"][1]["members"] == [
            {"id": signed_in["id"], "name": "Alice Example", "email": "alice@example.com"}
        ]

    def test_projects_newest_first_with_team(
        self, client: TestClient, signed_in: dict[str, Any]
    ) -> None:
        """Projects list newest first with their team resolved."""
        team = client.post("/api/teams", json={"name": "Core"}).json()["data"]
        client.post("/api/projects", json={"name": "Alpha", "team": team["id"]})
        created = client.post(
            "/api/projects",
            json={"name": "Beta", "status": "active", "startDate": "2024-01-02T00:00:00Z"},
        )
        assert created.status_code == 201
        assert created.json()["data"]["status"] == "active"
        assert created.json()["data"]["startDate"].startswith("2024-01-02")

        projects = client.get("/api/projects").json()["data"]

        assert [p["name"] for p in projects] == ["Beta", "Alpha"]
        assert projects[1]["team"] == {"id": team["id"], "name": "Core", "description": None}

    def test_project_validation(self, client: TestClient, signed_in: dict[str, Any]) -> None:
        """Unknown project status is rejected."""
        response = client.post("/api/projects", json={"name": "Alpha", "status": "archived"})
        assert response.status_code == 400


class TestTagRoutes:
    """Tests for /api/tags."""

    def test_create_and_list(self, client: TestClient, signed_in: dict[str, Any]) -> None:
        """Tags are lowercased and get a palette colour by default."""
        response = client.post("/api/tags", json={"name": "Frontend"})

        assert response.status_code == 201
        tag = response.json()["data"]
        assert tag["name"] == "frontend"
        assert tag["color"] in TAG_PALETTE

        listing = client.get("/api/tags").json()
        assert listing["count"] == 1

    def test_duplicate_returns_existing(
        self, client: TestClient, signed_in: dict[str, Any]
    ) -> None:
        """A duplicate name is a 409 carrying the existing tag."""
        existing = client.post("/api/tags", json={"name": "bug", "color": "#fff"}).json()["data"]

        response = client.post("/api/tags", json={"name": "BUG"})

        assert response.status_code == 409
        body = response.json()
        assert body["message"] == "Tag already exists"
        assert body["data"]["id"] == existing["id"]

    def test_invalid_color(self, client: TestClient, signed_in: dict[str, Any]) -> None:
        """Colours must be hex."""
        response = client.post("/api/tags", json={"name": "bug", "color": "blue"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "color"


class TestUserRoutes:
    """Tests for /api/users."""

    def test_search(
        self,
        client: TestClient,
        signed_in: dict[str, Any],
        seed: Callable[..., dict[str, Any]],
    ) -> None:
        """Search matches name, email or username without exposing hashes."""
        seed("users", username="bob", name="Bob", email="bob@corp.io", password_hash="x")
        seed("users", username="al", name="Al Gone", email="al@corp.io", is_active=False)

        everyone = client.get("/api/users").json()
        assert [u["username"] for u in everyone["data"]] == ["alice", "bob"]
        assert all("password_hash" not in u for u in everyone["data"])

        corp = client.get("/api/users", params={"search": "CORP"}).json()
        assert corp["count"] == 1
        assert corp["data"][0]["username"] == "bob"

        assert client.get("/api/users", params={"limit": 0}).status_code == 400

    def test_get_user(
        self,
        client: TestClient,
        signed_in: dict[str, Any],
        seed: Callable[..., dict[str, Any]],
    ) -> None:
        """Inactive and unknown users are 404."""
        gone = seed("users", username="al", name="Al", email="al@corp.io", is_active=False)

        assert client.get(f"/api/users/{signed_in['id']}").json()["data"] == signed_in
        assert client.get(f"/api/users/{gone['id']}").status_code == 404
        assert client.get("/api/users/missing").json() == {
            "success": False,
            "message": "User not found",
        }
