"""Focus modes API routes."""
import logging
from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from zen.database import get_db
from zen.errors import api_error
from zen.models.focus_mode import FocusMode
from zen.schemas.base import MAX_RECORD_ID
from zen.schemas.focus_mode import (
    FocusModeCreate, FocusModeUpdate, FocusModeResponse, validation_error,
)
from zen.services import focus_store
from zen.services.focus_store import FocusModeNotFound, UnknownTagError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/focus-modes", tags=["focus-modes"])


@router.get("", response_model=list[FocusModeResponse])
async def list_focus_modes(db: AsyncSession = Depends(get_db)):
    """List all focus modes in store order."""
    try:
        focus_modes = await focus_store.get_all_focus_modes(db)
    except SQLAlchemyError as e:
        logger.exception("Failed to read focus modes")
        raise api_error("FOCUS_READ_FAILED", "Error fetching focus modes.", 500, e)
    return [_to_response(f) for f in focus_modes]


@router.get("/{focus_id}", response_model=FocusModeResponse)
async def get_focus_mode(focus_id: str, db: AsyncSession = Depends(get_db)):
    """Get a single focus mode by ID."""
    focus_mode_id = _parse_focus_id(focus_id)
    try:
        focus_mode = await focus_store.get_focus_mode(db, focus_mode_id)
    except FocusModeNotFound as e:
        raise api_error("FOCUS_NOT_FOUND", "Focus mode not found", 404, e)
    except SQLAlchemyError as e:
        logger.exception("Failed to read focus mode %s", focus_mode_id)
        raise api_error("FOCUS_READ_FAILED", "Error fetching focus mode.", 500, e)
    return _to_response(focus_mode)


@router.post("", response_model=FocusModeResponse, status_code=201)
async def create_focus_mode(
    body: FocusModeCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a focus mode. Any focusId in the body is ignored."""
    _check_valid(body)

    try:
        focus_mode = await focus_store.create_focus_mode(db, body)
    except UnknownTagError as e:
        raise api_error("INVALID_TAG", "Unknown tag", 400, e)
    except SQLAlchemyError as e:
        logger.exception("Failed to create focus mode")
        raise api_error("FOCUS_CREATE_FAILED", "Error creating focus mode", 500, e)
    return _to_response(focus_mode)


@router.put("", response_model=FocusModeResponse)
@router.patch("", response_model=FocusModeResponse)
async def update_focus_mode(
    body: FocusModeUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Replace a focus mode's name and tags. The body must carry focusId."""
    _check_valid(body)

    try:
        focus_mode = await focus_store.update_focus_mode(db, body)
    except FocusModeNotFound as e:
        raise api_error("FOCUS_NOT_FOUND", "Focus mode not found", 404, e)
    except UnknownTagError as e:
        raise api_error("INVALID_TAG", "Unknown tag", 400, e)
    except SQLAlchemyError as e:
        logger.exception("Failed to update focus mode %s", body.focus_id)
        raise api_error("FOCUS_UPDATE_FAILED", "Error updating focus mode", 500, e)
    return _to_response(focus_mode)


@router.delete("/{focus_id}", status_code=204)
async def delete_focus_mode(focus_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a focus mode."""
    focus_mode_id = _parse_focus_id(focus_id)

    try:
        await focus_store.delete_focus_mode(db, focus_mode_id)
    except FocusModeNotFound as e:
        raise api_error("FOCUS_NOT_FOUND", "Focus mode not found", 404, e)
    except SQLAlchemyError as e:
        logger.exception("Failed to delete focus mode %s", focus_mode_id)
        raise api_error("FOCUS_DELETE_FAILED", "Error deleting focus mode", 500, e)
    return Response(status_code=204)


@router.post("/{focus_id}/activate", response_model=FocusModeResponse)
async def activate_focus_mode(focus_id: str, db: AsyncSession = Depends(get_db)):
    """Record that a focus mode was just used."""
    focus_mode_id = _parse_focus_id(focus_id)

    try:
        focus_mode = await focus_store.touch_focus_mode(db, focus_mode_id)
    except FocusModeNotFound as e:
        raise api_error("FOCUS_NOT_FOUND", "Focus mode not found", 404, e)
    except SQLAlchemyError as e:
        logger.exception("Failed to activate focus mode %s", focus_mode_id)
        raise api_error("FOCUS_UPDATE_FAILED", "Error updating focus mode", 500, e)
    return _to_response(focus_mode)


def _check_valid(body: FocusModeCreate) -> None:
    message = validation_error(body)
    if message:
        raise api_error("INVALID_FOCUS_MODE", message, 400)


def _parse_focus_id(raw: str) -> int:
    # Parsed by hand so a bad id gets its own error code instead of a generic 400
    try:
        focus_id = int(raw)
    except ValueError as e:
        raise api_error("INVALID_FOCUS_ID", "Invalid focus ID", 400, e)

    if not 1 <= focus_id <= MAX_RECORD_ID:
        raise api_error("INVALID_FOCUS_ID", "Invalid focus ID", 400, ValueError(f"{raw} is out of range"))
    return focus_id


def _to_response(focus_mode: FocusMode) -> dict:
    """Convert SQLAlchemy model to response dict."""
    return {
        "focus_id": focus_mode.id,
        "name": focus_mode.name,
        "tags": [{"id": t.id, "name": t.name} for t in focus_mode.tags],
        "last_used_at": focus_mode.last_used_at,
    }
