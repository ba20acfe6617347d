"""Auth domain types."""

from datetime import datetime

from pydantic import BaseModel


class User(BaseModel):
    """User domain model."""

    id: str
    username: str
    name: str
    email: str | None = None
    password_hash: str | None = None
    is_active: bool = True
    created_at: datetime | None = None

    def public(self) -> dict[str, object]:
        """Profile fields safe to return to clients."""
        return {
            "id": self.id,
            "username": self.username,
            "name": self.name,
            "email": self.email,
        }


class AccessClaims(BaseModel):
    """Claims carried by an access token."""

    sub: str  # user_id
    username: str
    exp: int  # expiration timestamp
    iat: int  # issued at timestamp
    jti: str


class RefreshClaims(BaseModel):
    """Claims carried by a refresh token."""

    sub: str  # user_id
    exp: int
    iat: int
    jti: str


class TokenPair(BaseModel):
    """Freshly issued access and refresh tokens."""

    access_token: str
    refresh_token: str
