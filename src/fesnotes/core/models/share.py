# Note sharing between users
import uuid
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .note import Note
    from .user import User


class SharePermission(str, Enum):
    """Permission carried by a grant."""

    READ = "read"
    EDIT = "edit"


class Share(BaseModel):
    """Grant of read or edit access on one note to one other user."""

    __tablename__ = "shares"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    # copy of Note.owner_id at grant time
    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    grantee_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    permission: Mapped[str] = mapped_column(
        String(10), default=SharePermission.READ.value, nullable=False
    )

    note: Mapped["Note"] = relationship("Note", lazy="selectin")
    owner: Mapped["User"] = relationship("User", foreign_keys=[owner_id], lazy="selectin")
    grantee: Mapped["User"] = relationship("User", foreign_keys=[grantee_id], lazy="selectin")

    __table_args__ = (
        UniqueConstraint("note_id", "grantee_id", name="uq_shares_note_grantee"),
        CheckConstraint("owner_id <> grantee_id", name="ck_shares_not_self"),
        CheckConstraint("permission IN ('read', 'edit')", name="ck_shares_permission"),
        Index("idx_shares_note_id", "note_id"),
        Index("idx_shares_grantee_id", "grantee_id"),
        Index("idx_shares_owner_id", "owner_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Share(note_id={self.note_id}, grantee_id={self.grantee_id}, "
            f"permission={self.permission})>"
        )

