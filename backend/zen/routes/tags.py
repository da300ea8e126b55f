"""Tags API routes."""
import logging
from fastapi import APIRouter, Depends, Path
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zen.database import get_db
from zen.errors import api_error
from zen.models.tag import Tag
from zen.schemas.base import MAX_RECORD_ID
from zen.schemas.tag import TagCreate, TagResponse
from zen.services import focus_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tags", tags=["tags"])


@router.get("", response_model=list[TagResponse])
async def list_tags(db: AsyncSession = Depends(get_db)):
    """List all tags by name."""
    result = await db.execute(select(Tag).order_by(Tag.name))
    return [_to_response(t) for t in result.scalars().all()]


@router.post("", response_model=TagResponse, status_code=201)
async def create_tag(
    body: TagCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new tag. Names are unique."""
    name = body.name.strip()
    if not name:
        raise api_error("INVALID_TAG", "Tag name is required", 400)

    result = await db.execute(select(Tag).where(Tag.name == name))
    if result.scalar_one_or_none():
        raise api_error("TAG_EXISTS", f"Tag '{name}' already exists", 409)

    tag = Tag(name=name)
    db.add(tag)
    await db.commit()
    await db.refresh(tag)
    logger.info("Created tag %s (%s)", tag.id, tag.name)
    return _to_response(tag)


@router.delete("/{tag_id}")
async def delete_tag(
    tag_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    db: AsyncSession = Depends(get_db),
):
    """Delete a tag. Refused while it is the last tag of any focus mode."""
    result = await db.execute(select(Tag).where(Tag.id == tag_id))
    tag = result.scalar_one_or_none()
    if not tag:
        raise api_error("TAG_NOT_FOUND", "Tag not found", 404)

    dependents = await focus_store.focus_modes_depending_on_tag(db, tag_id)
    if dependents:
        raise api_error(
            "TAG_IN_USE",
            f"Tag '{tag.name}' is the only tag of focus modes {', '.join(str(i) for i in dependents)}",
            409,
        )

    await db.delete(tag)
    await db.commit()
    logger.info("Deleted tag %s", tag_id)
    return {"deleted": True, "id": tag_id}


def _to_response(tag: Tag) -> dict:
    """Convert SQLAlchemy model to response dict."""
    return {
        "id": tag.id,
        "name": tag.name,
    }
