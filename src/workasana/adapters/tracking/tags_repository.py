"""Tags repository."""

import random

import structlog

from workasana.adapters.db.base import DuplicateRecordError
from workasana.core.exceptions import Conflict
from workasana.core.interfaces import Record, RecordStore
from workasana.core.tracking import TAG_PALETTE, TagCreate

logger = structlog.get_logger()

TAGS = "tags"


class TagsRepository:
    """Repository for tag operations.

    Tag names are stored lowercased and are unique among active tags.
    """

    def __init__(self, store: RecordStore, rng: random.Random | None = None) -> None:
        """Initialize the repository.

        Args:
            store: Record store.
            rng: Random source for palette colours; seed it for reproducible picks.
        """
        self._store = store
        self._rng = rng or random.Random()

    async def list_active(self) -> list[Record]:
        """List active tags sorted by name."""
        return await self._store.find(TAGS, {"is_active": True}, sort="name")

    async def get_by_name(self, name: str) -> Record | None:
        """Get an active tag by (case-insensitive) name."""
        return await self._store.find_one(TAGS, {"name": name.lower(), "is_active": True})

    def pick_color(self) -> str:
        """Pick a palette colour at random."""
        return self._rng.choice(TAG_PALETTE)

    async def create(self, data: TagCreate) -> Record:
        """Create a new tag.

        Raises:
            Conflict: If an active tag with the same name exists.
        """
        existing = await self.get_by_name(data.name)
        if existing:
            raise Conflict("Tag already exists", data=existing)

        try:
            row = await self._store.insert_one(
                TAGS,
                {"name": data.name.lower(), "color": data.color or self.pick_color()},
            )
        except DuplicateRecordError:
            raise Conflict("Tag already exists") from None

        logger.info("tag_created", tag_id=row["id"], name=row["name"])
        return row
