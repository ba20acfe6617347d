"""Tests for session cookie transport."""

from fastapi import Response

from workasana.core.auth.types import TokenPair
from workasana.entrypoints.api.session import clear_session_cookies, set_session_cookies


def cookie_attributes(response: Response) -> dict[str, dict[str, str]]:
    """Parse Set-Cookie headers into ``{name: {attribute: value}}``."""
    cookies: dict[str, dict[str, str]] = {}
    for header in response.headers.getlist("set-cookie"):
        first, *attributes = [part.strip() for part in header.split(";")]
        name, value = first.split("=", 1)
        parsed = {"value": value.strip('"')}
        for attribute in attributes:
            key, _, attr_value = attribute.partition("=")
            parsed[key.lower()] = attr_value.lower()
        cookies[name] = parsed
    return cookies


def without_lifetime(attributes: dict[str, str]) -> dict[str, str]:
    """Drop the attributes that differ between set and clear."""
    return {k: v for k, v in attributes.items() if k not in ("value", "max-age")}


class TestSessionCookies:
    """Test cookie attributes."""

    def test_set_cookies(self) -> None:
        """Both tokens are written with their paths and lifetimes."""
        response = Response()
        set_session_cookies(response, TokenPair(access_token="acc", refresh_token="ref"))

        cookies = cookie_attributes(response)

        access, refresh = cookies["access_token"], cookies["refresh_token"]
        assert access["value"] == "acc"
        assert access["path"] == "/"
        assert access["max-age"] == "900"
        assert refresh["value"] == "ref"
        assert refresh["path"] == "/api/auth/refresh-token"
        assert refresh["max-age"] == "604800"
        for cookie in (access, refresh):
            assert "httponly" in cookie
            assert "secure" in cookie
            assert cookie["samesite"] == "none"

    def test_clear_uses_same_attributes(self) -> None:
        """Clearing repeats every attribute except value and lifetime."""
        issued, cleared = Response(), Response()
        set_session_cookies(issued, TokenPair(access_token="acc", refresh_token="ref"))
        clear_session_cookies(cleared)

        issued_cookies = cookie_attributes(issued)
        cleared_cookies = cookie_attributes(cleared)

        for name in ("access_token", "refresh_token"):
            assert cleared_cookies[name]["value"] == ""
            assert cleared_cookies[name]["max-age"] == "0"
            assert without_lifetime(cleared_cookies[name]) == without_lifetime(issued_cookies[name])
