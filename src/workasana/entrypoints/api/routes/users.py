"""User directory routes."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from workasana.adapters.auth import StoreUserRepository
from workasana.core.exceptions import NotFound
from workasana.entrypoints.api.deps import get_user_repository
from workasana.entrypoints.api.errors import translate_errors
from workasana.entrypoints.api.middleware.jwt_auth import SessionDep

router = APIRouter(prefix="/users", tags=["users"])

UsersDep = Annotated[StoreUserRepository, Depends(get_user_repository)]


@router.get("")
async def list_users(
    session: SessionDep,
    users: UsersDep,
    search: str | None = None,
    limit: Annotated[int, Query(ge=1, le=200)] = 50,
) -> dict[str, Any]:
    """Search active users by name, email or username."""
    with translate_errors("Error fetching users"):
        found = await users.search_users(search, limit=limit)
    return {"success": True, "count": len(found), "data": [u.public() for u in found]}


@router.get("/{user_id}")
async def get_user(user_id: str, session: SessionDep, users: UsersDep) -> dict[str, Any]:
    """Get a single active user."""
    with translate_errors("Error fetching user"):
        user = await users.get_user_by_id(user_id)
        if not user or not user.is_active:
            raise NotFound("User not found")
    return {"success": True, "data": user.public()}
