"""Session cookies carrying the access and refresh tokens.

The refresh cookie is scoped to the refresh endpoint so browsers never
attach it to other requests. Clearing must repeat the exact attributes
used when setting, otherwise browsers keep the old cookie.
"""

from fastapi import Response

from workasana.core.auth.types import TokenPair

ACCESS_COOKIE = "access_token"
REFRESH_COOKIE = "refresh_token"

ACCESS_COOKIE_PATH = "/"
REFRESH_COOKIE_PATH = "/api/auth/refresh-token"

ACCESS_COOKIE_MAX_AGE = 15 * 60
REFRESH_COOKIE_MAX_AGE = 7 * 24 * 60 * 60

# Cross-site so a separately hosted frontend can send credentials.
COOKIE_FLAGS = {"httponly": True, "secure": True, "samesite": "none"}


def _write_cookie(response: Response, name: str, value: str, max_age: int, path: str) -> None:
    response.set_cookie(
        key=name,
        value=value,
        max_age=max_age,
        path=path,
        **COOKIE_FLAGS,  # type: ignore[arg-type]
    )


def set_session_cookies(response: Response, pair: TokenPair) -> None:
    """Attach both tokens to a response."""
    _write_cookie(
        response, ACCESS_COOKIE, pair.access_token, ACCESS_COOKIE_MAX_AGE, ACCESS_COOKIE_PATH
    )
    _write_cookie(
        response, REFRESH_COOKIE, pair.refresh_token, REFRESH_COOKIE_MAX_AGE, REFRESH_COOKIE_PATH
    )


def clear_session_cookies(response: Response) -> None:
    """Expire both session cookies."""
    _write_cookie(response, ACCESS_COOKIE, "", 0, ACCESS_COOKIE_PATH)
    _write_cookie(response, REFRESH_COOKIE, "", 0, REFRESH_COOKIE_PATH)
