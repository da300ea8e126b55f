"""Focus mode persistence.

Route handlers only validate and marshal; every read and write of focus modes
goes through this module. Functions take the request's AsyncSession, commit
their own work and return ORM objects with ``tag_links`` (and each link's
``tag``) loaded, so callers can read ``focus_mode.tags`` without further IO.

Database failures propagate as ``SQLAlchemyError``.
"""
import logging
from datetime import datetime, timezone
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from zen.models.focus_mode import FocusMode, FocusModeTag
from zen.models.tag import Tag
from zen.schemas.focus_mode import FocusModeCreate, FocusModeUpdate

logger = logging.getLogger(__name__)


class FocusModeNotFound(Exception):
    def __init__(self, focus_id: int):
        super().__init__(f"Focus mode {focus_id} does not exist")
        self.focus_id = focus_id


class UnknownTagError(Exception):
    def __init__(self, tag_ids: list[int]):
        super().__init__(f"Unknown tag ids: {', '.join(str(i) for i in tag_ids)}")
        self.tag_ids = tag_ids


async def get_all_focus_modes(db: AsyncSession) -> list[FocusMode]:
    """All focus modes, most recently used first. Never-used modes come last."""
    result = await db.execute(
        select(FocusMode)
        .order_by(FocusMode.last_used_at.desc().nulls_last(), FocusMode.id)
    )
    return list(result.scalars().all())


async def get_focus_mode(db: AsyncSession, focus_id: int) -> FocusMode:
    result = await db.execute(select(FocusMode).where(FocusMode.id == focus_id))
    focus_mode = result.scalar_one_or_none()
    if not focus_mode:
        raise FocusModeNotFound(focus_id)
    return focus_mode


async def create_focus_mode(db: AsyncSession, data: FocusModeCreate) -> FocusMode:
    """Insert a focus mode. The id comes from the database, never the payload."""
    tags = await _resolve_tags(db, [t.id for t in data.tags])

    focus_mode = FocusMode(name=data.name, tag_links=_links_for(tags))
    db.add(focus_mode)
    await db.commit()
    await db.refresh(focus_mode)
    logger.info("Created focus mode %s with %d tags", focus_mode.id, len(tags))
    return focus_mode


async def update_focus_mode(db: AsyncSession, data: FocusModeUpdate) -> FocusMode:
    """Replace name and tags of an existing focus mode."""
    focus_mode = await get_focus_mode(db, data.focus_id)
    tags = await _resolve_tags(db, [t.id for t in data.tags])

    focus_mode.name = data.name
    focus_mode.tag_links = _links_for(tags)

    await db.commit()
    await db.refresh(focus_mode)
    logger.info("Updated focus mode %s", focus_mode.id)
    return focus_mode


async def delete_focus_mode(db: AsyncSession, focus_id: int) -> None:
    focus_mode = await get_focus_mode(db, focus_id)
    await db.delete(focus_mode)
    await db.commit()
    logger.info("Deleted focus mode %s", focus_id)


async def touch_focus_mode(db: AsyncSession, focus_id: int) -> FocusMode:
    """Mark a focus mode as used now."""
    focus_mode = await get_focus_mode(db, focus_id)
    focus_mode.last_used_at = datetime.now(timezone.utc)
    await db.commit()
    await db.refresh(focus_mode)
    return focus_mode


async def focus_modes_depending_on_tag(db: AsyncSession, tag_id: int) -> list[int]:
    """Ids of focus modes whose only tag is ``tag_id``."""
    tagged = select(FocusModeTag.focus_mode_id).where(FocusModeTag.tag_id == tag_id)
    result = await db.execute(
        select(FocusModeTag.focus_mode_id)
        .where(FocusModeTag.focus_mode_id.in_(tagged))
        .group_by(FocusModeTag.focus_mode_id)
        .having(func.count(FocusModeTag.id) == 1)
        .order_by(FocusModeTag.focus_mode_id)
    )
    return list(result.scalars().all())


async def _resolve_tags(db: AsyncSession, tag_ids: list[int]) -> list[Tag]:
    """Load tags in the given order. Repeated ids keep their first position."""
    ordered_ids = list(dict.fromkeys(tag_ids))
    if not ordered_ids:
        return []

    result = await db.execute(select(Tag).where(Tag.id.in_(ordered_ids)))
    by_id = {tag.id: tag for tag in result.scalars().all()}

    missing = [tag_id for tag_id in ordered_ids if tag_id not in by_id]
    if missing:
        raise UnknownTagError(missing)
    return [by_id[tag_id] for tag_id in ordered_ids]


def _links_for(tags: list[Tag]) -> list[FocusModeTag]:
    return [FocusModeTag(tag=tag, position=position) for position, tag in enumerate(tags)]
