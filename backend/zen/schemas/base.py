"""Shared schema pieces.

Python attributes stay snake_case; JSON on the wire is camelCase. Request
models derive from CamelModel, response models from CamelORMModel so they
can also be filled straight from ORM rows.
"""
from datetime import datetime, timezone
from typing import Annotated, Optional
from pydantic import AfterValidator, BaseModel, Field
from pydantic.alias_generators import to_camel

# Largest value a BIGINT primary key can hold
MAX_RECORD_ID = 2**63 - 1

RecordId = Annotated[int, Field(ge=1, le=MAX_RECORD_ID)]


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands timestamps back without an offset; they are always stored as UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    """Request payloads: accept camelCase or field names."""
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class CamelORMModel(CamelModel):
    """Response payloads, readable from SQLAlchemy objects."""
    model_config = {
        **CamelModel.model_config,
        "from_attributes": True,
    }
