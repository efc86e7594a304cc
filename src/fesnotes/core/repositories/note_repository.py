"""Note repository for database operations."""

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note
from ..models.share import Share
from ..models.user import User


def _search_condition(term: str):
    """Case-insensitive substring match on title OR content, wildcards literal."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    pattern = f"%{escaped}%"
    return or_(
        Note.title.ilike(pattern, escape="\\"),
        Note.content.ilike(pattern, escape="\\"),
    )


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def get_by_id(self, note_id: UUID) -> Optional[Note]:
        """Get note by ID."""
        stmt = select(Note).where(Note.id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_note(self, note: Note, update_data: dict) -> Note:
        """Apply content changes; ownership columns are never touched here."""
        for key, value in update_data.items():
            if key in ("id", "owner_id", "created_at"):
                continue
            setattr(note, key, value)

        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note_id: UUID) -> bool:
        """Delete note; its grants cascade in the DB."""
        result = await self.session.execute(delete(Note).where(Note.id == note_id))
        await self.session.commit()
        return result.rowcount > 0

    async def list_owned_notes(self, user_id: UUID, search: Optional[str] = None) -> List[Note]:
        """Notes owned by the user, optionally filtered by search term."""
        stmt = select(Note).where(Note.owner_id == user_id)
        if search:
            stmt = stmt.where(_search_condition(search))

        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def list_shared_notes(
        self, user_id: UUID, search: Optional[str] = None
    ) -> List[Tuple[Note, Share, str]]:
        """Notes granted to the user, with the grant and the owner's username."""
        stmt = (
            select(Note, Share, User.username)
            .join(Share, Share.note_id == Note.id)
            .join(User, User.id == Note.owner_id)
            .where(Share.grantee_id == user_id)
        )
        if search:
            stmt = stmt.where(_search_condition(search))

        result = await self.session.execute(stmt)
        return [(note, share, username) for note, share, username in result.all()]
