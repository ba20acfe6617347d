"""Tags API routes."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, status

from workasana.adapters.tracking import TagsRepository
from workasana.core.tracking import TagCreate
from workasana.entrypoints.api.deps import get_tags_repository
from workasana.entrypoints.api.errors import translate_errors
from workasana.entrypoints.api.middleware.jwt_auth import SessionDep
from workasana.entrypoints.api.wire import to_wire

router = APIRouter(prefix="/tags", tags=["tags"])

TagsDep = Annotated[TagsRepository, Depends(get_tags_repository)]


@router.get("")
async def list_tags(session: SessionDep, tags: TagsDep) -> dict[str, Any]:
    """List active tags."""
    with translate_errors("Error fetching tags"):
        rows = await tags.list_active()
    return {"success": True, "count": len(rows), "data": to_wire(rows)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_tag(body: TagCreate, session: SessionDep, tags: TagsDep) -> dict[str, Any]:
    """Create a tag; a colour is picked from the palette when none is given."""
    with translate_errors("Error creating tag"):
        tag = await tags.create(body)
    return {"success": True, "message": "Tag created successfully", "data": to_wire(tag)}
