"""User repository protocol for credential store operations."""

from typing import Protocol, runtime_checkable

from workasana.core.auth.types import User


@runtime_checkable
class UserRepository(Protocol):
    """Protocol for user record operations.

    Implementations provide actual store access (MongoDB, in-memory).
    """

    async def get_user_by_id(self, user_id: str) -> User | None:
        """Get user by ID."""
        ...

    async def get_user_by_login(self, login: str) -> User | None:
        """Get user whose username or email equals ``login``."""
        ...

    async def find_existing(self, username: str, email: str | None) -> User | None:
        """Get a user colliding on username or email."""
        ...

    async def create_user(
        self,
        username: str,
        name: str,
        email: str | None,
        password_hash: str,
    ) -> User:
        """Create a new user."""
        ...

    async def search_users(self, search: str | None = None, limit: int = 50) -> list[User]:
        """List active users, optionally filtered by a search string."""
        ...
