"""Domain-specific exceptions.

All exceptions in the workasana system inherit from WorkasanaError,
making it easy to catch all system errors while still being able
to handle specific error types. Each subclass carries the HTTP status
the API layer renders it with.
"""

from __future__ import annotations

from typing import Any


class WorkasanaError(Exception):
    """Base exception for all workasana errors.

    Attributes:
        message: Short user-visible message.
        detail: Optional diagnostic detail. Never contains secrets,
            token values or password hashes.
    """

    status_code: int = 500

    def __init__(self, message: str, detail: str | None = None) -> None:
        """Initialize WorkasanaError.

        Args:
            message: Short user-visible message.
            detail: Optional diagnostic detail.
        """
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationFailure(WorkasanaError):
    """Missing or malformed input.

    Attributes:
        errors: Optional list of per-field validation errors.
    """

    status_code = 400

    def __init__(
        self,
        message: str,
        detail: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        """Initialize ValidationFailure.

        Args:
            message: Short user-visible message.
            detail: Optional diagnostic detail.
            errors: Optional per-field errors.
        """
        super().__init__(message, detail)
        self.errors = errors


class AuthenticationFailure(WorkasanaError):
    """Bad credentials or an unusable refresh token."""

    status_code = 401


class AuthorizationFailure(WorkasanaError):
    """Missing or invalid session on a protected operation."""

    status_code = 403


class NotFound(WorkasanaError):
    """Requested record does not exist or is inactive."""

    status_code = 404


class Conflict(WorkasanaError):
    """A unique field collided with an existing record.

    Attributes:
        data: Optional existing record that caused the collision.
    """

    status_code = 409

    def __init__(
        self,
        message: str,
        detail: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        """Initialize Conflict.

        Args:
            message: Short user-visible message.
            detail: Optional diagnostic detail.
            data: Optional existing record.
        """
        super().__init__(message, detail)
        self.data = data


class InternalFailure(WorkasanaError):
    """Unexpected store or runtime error."""

    status_code = 500
