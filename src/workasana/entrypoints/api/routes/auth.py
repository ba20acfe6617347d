"""Auth API routes for registration, login, logout and token refresh."""

from typing import Annotated, Any

from fastapi import APIRouter, Cookie, Depends, Response, status
from pydantic import BaseModel

from workasana.core.auth.service import AuthService
from workasana.entrypoints.api.deps import get_auth_service
from workasana.entrypoints.api.errors import translate_errors
from workasana.entrypoints.api.middleware.jwt_auth import SessionDep
from workasana.entrypoints.api.session import clear_session_cookies, set_session_cookies

router = APIRouter(prefix="/auth", tags=["auth"])

AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


# Request models. Fields are optional so the service can report which
# required field is missing.
class RegisterRequest(BaseModel):
    """Registration request body."""

    username: str | None = None
    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    """Login request body. ``username`` may also hold an email address."""

    username: str | None = None
    password: str | None = None


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    response: Response,
    service: AuthServiceDep,
) -> dict[str, Any]:
    """Create a user and start a session."""
    with translate_errors("Error registering user"):
        user, pair = await service.register(
            username=body.username,
            name=body.name,
            email=body.email,
            password=body.password,
        )
    set_session_cookies(response, pair)
    return {"message": "User registered successfully", "user": user.public()}


@router.post("/login")
async def login(
    body: LoginRequest,
    response: Response,
    service: AuthServiceDep,
) -> dict[str, Any]:
    """Verify credentials and start a session."""
    with translate_errors("Error logging in user"):
        user, pair = await service.login(body.username, body.password)
    set_session_cookies(response, pair)
    return {"message": "Logged in successfully", "user": user.public()}


@router.post("/logout")
async def logout(response: Response) -> dict[str, str]:
    """Clear the session cookies."""
    clear_session_cookies(response)
    return {"message": "Logged out successfully"}


@router.post("/refresh-token")
async def refresh_token(
    response: Response,
    service: AuthServiceDep,
    refresh_token: Annotated[str | None, Cookie()] = None,
) -> dict[str, str]:
    """Rotate the session: issue a new access/refresh pair."""
    with translate_errors("Error refreshing token"):
        pair = await service.rotate(refresh_token)
    set_session_cookies(response, pair)
    return {"message": "Token refreshed successfully"}


@router.get("/user")
async def get_current_user(
    session: SessionDep,
    service: AuthServiceDep,
) -> dict[str, Any]:
    """Get the authenticated caller's profile."""
    with translate_errors("Internal server error"):
        profile = await service.get_profile(session.user_id)
    return {"message": "User fetched successfully", "user": profile}
