"""Import all models so SQLAlchemy metadata knows about them."""
from zen.models.base import Base
from zen.models.tag import Tag
from zen.models.focus_mode import FocusMode, FocusModeTag

__all__ = ["Base", "Tag", "FocusMode", "FocusModeTag"]
