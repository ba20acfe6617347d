"""Cookie session authentication gate."""

from dataclasses import dataclass
from typing import Annotated

import structlog
from fastapi import Cookie, Depends, Request

from workasana.core.auth.jwt import TokenError, TokenService
from workasana.core.exceptions import AuthorizationFailure
from workasana.entrypoints.api.deps import get_token_service

logger = structlog.get_logger()


@dataclass
class SessionContext:
    """Context from a verified access token."""

    user_id: str
    username: str


async def require_session(
    request: Request,
    tokens: Annotated[TokenService, Depends(get_token_service)],
    access_token: Annotated[str | None, Cookie()] = None,
) -> SessionContext:
    """Verify the access-token cookie and return session context.

    Expired tokens are rejected; refreshing is a separate, explicit call.

    Args:
        request: The current request.
        tokens: Token service.
        access_token: Value of the ``access_token`` cookie.

    Returns:
        SessionContext with the caller's identity.

    Raises:
        AuthorizationFailure: 403 if the cookie is missing or invalid.
    """
    if not access_token:
        raise AuthorizationFailure("You need to sign in before continuing")

    try:
        claims = tokens.verify_access(access_token)
    except TokenError as e:
        logger.warning("session_verification_failed", reason=str(e))
        raise AuthorizationFailure("Invalid token", detail=str(e)) from None

    context = SessionContext(user_id=claims.sub, username=claims.username)

    # Store in request state for downstream use
    request.state.user = context

    logger.debug("session_verified", user_id=context.user_id)
    return context


SessionDep = Annotated[SessionContext, Depends(require_session)]
