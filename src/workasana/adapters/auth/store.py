"""Record store implementation of UserRepository."""

import re
from typing import Any

from workasana.adapters.db.base import DuplicateRecordError
from workasana.core.auth.types import User
from workasana.core.exceptions import Conflict
from workasana.core.interfaces import RecordStore

USERS = "users"


class StoreUserRepository:
    """User repository on top of a record store."""

    def __init__(self, store: RecordStore) -> None:
        """Initialize with a record store.

        Args:
            store: Record store instance.
        """
        self._store = store

    def _row_to_user(self, row: dict[str, Any]) -> User:
        """Convert a stored record to a User model."""
        return User(
            id=row["id"],
            username=row["username"],
            name=row["name"],
            email=row.get("email"),
            password_hash=row.get("password_hash"),
            is_active=row.get("is_active", True),
            created_at=row.get("created_at"),
        )

    async def get_user_by_id(self, user_id: str) -> User | None:
        """Get user by ID."""
        row = await self._store.get_by_id(USERS, user_id)
        return self._row_to_user(row) if row else None

    async def get_user_by_login(self, login: str) -> User | None:
        """Get user whose username or email equals ``login``."""
        row = await self._store.find_one(
            USERS, {"$or": [{"username": login}, {"email": login}]}
        )
        return self._row_to_user(row) if row else None

    async def find_existing(self, username: str, email: str | None) -> User | None:
        """Get a user colliding on username or email."""
        # A username match takes precedence so callers can report the field.
        row = await self._store.find_one(USERS, {"username": username})
        if row is None and email:
            row = await self._store.find_one(USERS, {"email": email})
        return self._row_to_user(row) if row else None

    async def create_user(
        self,
        username: str,
        name: str,
        email: str | None,
        password_hash: str,
    ) -> User:
        """Create a new user."""
        try:
            row = await self._store.insert_one(
                USERS,
                {
                    "username": username,
                    "name": name,
                    "email": email,
                    "password_hash": password_hash,
                },
            )
        except DuplicateRecordError:
            # Lost a race with a concurrent registration; report the field that collided.
            existing = await self.find_existing(username, email)
            if existing is not None and existing.username != username:
                raise Conflict("Email already exists") from None
            raise Conflict("Username already exists") from None
        return self._row_to_user(row)

    async def search_users(self, search: str | None = None, limit: int = 50) -> list[User]:
        """List active users matching ``search`` in name, email or username."""
        filter: dict[str, Any] = {"is_active": True}
        if search:
            pattern = re.escape(search)
            filter["$or"] = [
                {field: {"$regex": pattern, "$options": "i"}}
                for field in ("name", "email", "username")
            ]
        rows = await self._store.find(USERS, filter, sort="name", limit=limit)
        return [self._row_to_user(row) for row in rows]
