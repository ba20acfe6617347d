"""JWT token creation and validation."""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

import jwt
from pydantic import ValidationError

from workasana.core.auth.types import AccessClaims, RefreshClaims, TokenPair, User


class TokenError(Exception):
    """Raised when token validation fails."""

    pass


ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 15
REFRESH_TOKEN_EXPIRE_DAYS = 7

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class TokenService:
    """Issues and verifies access and refresh tokens.

    Access and refresh tokens are signed with independent secrets, so a
    leaked key of one kind cannot forge tokens of the other.
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_ttl: timedelta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
        refresh_ttl: timedelta = timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS),
    ) -> None:
        """Initialize with signing secrets.

        Args:
            access_secret: Secret for access tokens.
            refresh_secret: Secret for refresh tokens.
            access_ttl: Access token lifetime.
            refresh_ttl: Refresh token lifetime.

        Raises:
            ValueError: If a secret is empty or both secrets are equal.
        """
        if not access_secret or not refresh_secret:
            raise ValueError("Token secrets must not be empty")
        if access_secret == refresh_secret:
            raise ValueError("Access and refresh token secrets must differ")
        self._access_secret = access_secret
        self._refresh_secret = refresh_secret
        self.access_ttl = access_ttl
        self.refresh_ttl = refresh_ttl

    def _encode(self, claims: dict[str, Any], secret: str, ttl: timedelta, kind: str) -> str:
        now = datetime.now(UTC)
        payload = {
            **claims,
            "type": kind,
            "jti": uuid4().hex,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
        }
        return jwt.encode(payload, secret, algorithm=ALGORITHM)

    def _decode(self, token: str, secret: str, kind: str) -> dict[str, Any]:
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise TokenError("Token has expired") from None
        except jwt.InvalidTokenError as e:
            raise TokenError(f"Invalid token: {e}") from None

        if payload.get("type") != kind:
            raise TokenError(f"Invalid token: expected {kind} token")
        return payload

    def create_access_token(self, user: User) -> str:
        """Create a short-lived access token.

        Args:
            user: Authenticated user

        Returns:
            Encoded JWT string
        """
        claims = {"sub": user.id, "username": user.username or user.email}
        return self._encode(claims, self._access_secret, self.access_ttl, ACCESS_TOKEN_TYPE)

    def create_refresh_token(self, user: User) -> str:
        """Create a long-lived refresh token.

        Args:
            user: Authenticated user

        Returns:
            Encoded JWT string
        """
        return self._encode(
            {"sub": user.id}, self._refresh_secret, self.refresh_ttl, REFRESH_TOKEN_TYPE
        )

    def issue_token_pair(self, user: User) -> TokenPair:
        """Issue a fresh access/refresh pair for a user."""
        return TokenPair(
            access_token=self.create_access_token(user),
            refresh_token=self.create_refresh_token(user),
        )

    def verify_access(self, token: str) -> AccessClaims:
        """Decode and validate an access token.

        Args:
            token: Encoded JWT string

        Returns:
            Decoded access claims

        Raises:
            TokenError: If token is invalid, of the wrong type or expired
        """
        payload = self._decode(token, self._access_secret, ACCESS_TOKEN_TYPE)
        try:
            return AccessClaims.model_validate(payload)
        except ValidationError:
            raise TokenError("Invalid token: malformed claims") from None

    def verify_refresh(self, token: str) -> RefreshClaims:
        """Decode and validate a refresh token.

        Raises:
            TokenError: If token is invalid, of the wrong type or expired
        """
        payload = self._decode(token, self._refresh_secret, REFRESH_TOKEN_TYPE)
        try:
            return RefreshClaims.model_validate(payload)
        except ValidationError:
            raise TokenError("Invalid token: malformed claims") from None
