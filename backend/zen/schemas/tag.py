"""Tag request/response schemas."""
from zen.schemas.base import CamelModel, CamelORMModel, RecordId


class TagCreate(CamelModel):
    name: str


class TagRef(CamelModel):
    """A tag as embedded in another payload. Only the id is significant."""
    id: RecordId
    name: str = ""


class TagResponse(CamelORMModel):
    id: int
    name: str
