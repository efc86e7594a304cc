# Note model for user content
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .user import User

# Fixed palette offered by the editor
NOTE_COLORS = ("yellow", "pink", "blue", "green", "purple", "orange")
DEFAULT_NOTE_COLOR = "yellow"


class Note(BaseModel):
    """Short text note with exactly one owner."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    color: Mapped[str] = mapped_column(String(20), default=DEFAULT_NOTE_COLOR, nullable=False)

    # owner reference, set at creation and never transferred
    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    owner: Mapped["User"] = relationship("User", lazy="selectin")

    __table_args__ = (
        CheckConstraint("length(title) > 0", name="ck_notes_title_nonempty"),
        CheckConstraint("length(content) > 0", name="ck_notes_content_nonempty"),
        Index("idx_notes_owner_id", "owner_id"),
        Index("idx_notes_owner_created", "owner_id", "created_at"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', owner_id={self.owner_id})>"

