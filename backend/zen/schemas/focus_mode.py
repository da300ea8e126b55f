"""Focus mode request/response schemas."""
from typing import Optional
from pydantic import Field
from zen.schemas.base import CamelModel, CamelORMModel, RecordId, UtcDatetime
from zen.schemas.tag import TagRef, TagResponse


class FocusModeCreate(CamelModel):
    # Missing fields decode to empty values and are rejected by validation_error
    name: str = ""
    tags: list[TagRef] = []


class FocusModeUpdate(FocusModeCreate):
    focus_id: RecordId = Field(alias="focusId")


class FocusModeResponse(CamelORMModel):
    focus_id: int = Field(alias="focusId")
    name: str
    tags: list[TagResponse] = []
    last_used_at: Optional[UtcDatetime] = None


def validation_error(focus_mode: FocusModeCreate) -> Optional[str]:
    """Return why a focus mode payload can't be stored, or None if it can."""
    if not focus_mode.name.strip():
        return "Focus name is required"

    if len(focus_mode.tags) == 0:
        return "At least one tag is required"

    return None
