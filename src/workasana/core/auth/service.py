"""Auth service for login, registration, and token rotation."""

import re
from typing import Any

import structlog

from workasana.core.auth.jwt import TokenError, TokenService
from workasana.core.auth.password import hash_password, verify_password
from workasana.core.auth.repository import UserRepository
from workasana.core.auth.types import TokenPair, User
from workasana.core.exceptions import (
    AuthenticationFailure,
    Conflict,
    NotFound,
    ValidationFailure,
)

logger = structlog.get_logger()

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 8


class AuthService:
    """Service for authentication operations."""

    def __init__(self, repo: UserRepository, tokens: TokenService) -> None:
        """Initialize with user repository and token service.

        Args:
            repo: Credential store.
            tokens: Token issuer/verifier.
        """
        self._repo = repo
        self._tokens = tokens

    async def register(
        self,
        username: str | None,
        name: str | None,
        email: str | None,
        password: str | None,
    ) -> tuple[User, TokenPair]:
        """Register a new user and start a session.

        Args:
            username: Unique username.
            name: Display name.
            email: Unique email address.
            password: Plain text password.

        Returns:
            The created user and a fresh token pair.

        Raises:
            ValidationFailure: If a field is missing or malformed.
            Conflict: If the username or email is already taken.
        """
        if not username or not name or not email or not password:
            raise ValidationFailure("Please provide all required fields")

        if not EMAIL_PATTERN.match(email):
            raise ValidationFailure("Please provide a valid email address")

        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationFailure(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )

        existing = await self._repo.find_existing(username, email)
        if existing:
            if existing.username == username:
                raise Conflict("Username already exists")
            raise Conflict("Email already exists")

        user = await self._repo.create_user(
            username=username,
            name=name,
            email=email,
            password_hash=hash_password(password),
        )
        logger.info("user_registered", user_id=user.id)

        return user, self._tokens.issue_token_pair(user)

    async def login(self, login: str | None, password: str | None) -> tuple[User, TokenPair]:
        """Authenticate a user by username or email.

        Args:
            login: Username or email address.
            password: Plain text password.

        Returns:
            The user and a fresh token pair.

        Raises:
            ValidationFailure: If a field is missing.
            AuthenticationFailure: If the credentials do not match.
        """
        if not login or not password:
            raise ValidationFailure("Please provide all required fields")

        user = await self._repo.get_user_by_login(login)
        if not user or not user.is_active:
            logger.info("login_failed", reason="unknown_user")
            raise AuthenticationFailure("Invalid credentials")

        if not verify_password(password, user.password_hash):
            logger.info("login_failed", reason="bad_password", user_id=user.id)
            raise AuthenticationFailure("Invalid credentials")

        logger.info("user_logged_in", user_id=user.id)
        return user, self._tokens.issue_token_pair(user)

    async def rotate(self, refresh_token: str | None) -> TokenPair:
        """Exchange a refresh token for a brand new token pair.

        The user is re-fetched so a removed or deactivated account cannot
        keep refreshing.

        Args:
            refresh_token: Refresh token from the session cookie.

        Returns:
            A new access/refresh pair.

        Raises:
            AuthenticationFailure: If the token is missing or invalid, or the
                user no longer exists.
        """
        if not refresh_token:
            raise AuthenticationFailure("No refresh token provided")

        try:
            claims = self._tokens.verify_refresh(refresh_token)
        except TokenError as e:
            logger.info("refresh_rejected", reason=str(e))
            raise AuthenticationFailure("Invalid refresh token", detail=str(e)) from None

        user = await self._repo.get_user_by_id(claims.sub)
        if not user or not user.is_active:
            logger.info("refresh_rejected", reason="user_not_found", user_id=claims.sub)
            raise AuthenticationFailure("User not found")

        logger.info("tokens_rotated", user_id=user.id)
        return self._tokens.issue_token_pair(user)

    async def get_profile(self, user_id: str) -> dict[str, Any]:
        """Get the public profile of a user.

        Raises:
            NotFound: If the user does not exist.
        """
        user = await self._repo.get_user_by_id(user_id)
        if not user:
            raise NotFound("User not found")
        return user.public()
