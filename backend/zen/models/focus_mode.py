"""Focus mode models - named, ordered groupings of tags."""
from datetime import datetime
from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from zen.models.base import Base, TimestampMixin


class FocusMode(Base, TimestampMixin):
    __tablename__ = "focus_modes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    last_used_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    tag_links: Mapped[list["FocusModeTag"]] = relationship(
        back_populates="focus_mode",
        cascade="all, delete-orphan",
        order_by="FocusModeTag.position",
        lazy="selectin",
    )

    @property
    def tags(self):
        return [link.tag for link in self.tag_links]


class FocusModeTag(Base):
    __tablename__ = "focus_mode_tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    focus_mode_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("focus_modes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    tag_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, default=0)

    focus_mode: Mapped["FocusMode"] = relationship(back_populates="tag_links")
    tag = relationship("Tag", back_populates="focus_links", lazy="selectin")
