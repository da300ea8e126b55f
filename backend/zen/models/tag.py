"""Tag model - labels that focus modes and other features refer to."""
from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from zen.models.base import Base, TimestampMixin


class Tag(Base, TimestampMixin):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    # Focus modes only hold references; dropping a tag drops those references
    focus_links = relationship(
        "FocusModeTag", back_populates="tag", cascade="all",
    )
