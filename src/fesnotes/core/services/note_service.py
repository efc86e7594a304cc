"""Note service implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..access import (
    AccessLevel,
    AccessResolver,
    can_read,
    can_write,
    is_owner,
    merge_visible_notes,
)
from ..errors import NotFoundError
from ..logging import get_logger
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..repositories.user_repository import UserRepository
from ..schemas.notes import (
    NoteCreate,
    NoteListQuery,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
)
from .interfaces import INoteService

logger = get_logger("notes")


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.user_repo = UserRepository(session)
        self.access = AccessResolver(session)

    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note owned by the caller."""
        owner = await self.user_repo.get_by_id(user_id)
        if not owner:
            # token outlived its user
            raise NotFoundError("User not found")

        note = await self.note_repo.create_note(
            {
                "title": request.title,
                "content": request.content,
                "color": request.color,
                "owner_id": user_id,
            }
        )
        logger.info("Note created", extra={"note_id": str(note.id), "owner_id": str(user_id)})

        return self._note_to_response(note, AccessLevel.OWNER, owner.username)

    async def get_note(self, note_id: UUID, user_id: UUID) -> NoteResponse:
        """Get note by ID.

        Owners and grantees (read or edit) can fetch; anyone else gets 404.
        """
        note, access = await self.access.require(user_id, note_id, can_read, "read")
        return self._note_to_response(note, access, note.owner.username)

    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Update title/content/color as owner or edit grantee."""
        note, access = await self.access.require(user_id, note_id, can_write, "edit")
        owner_username = note.owner.username

        update_data = {"title": request.title, "content": request.content}
        if request.color is not None:
            update_data["color"] = request.color

        note = await self.note_repo.update_note(note, update_data)
        logger.info(
            "Note updated",
            extra={"note_id": str(note_id), "user_id": str(user_id), "access": access.value},
        )

        return self._note_to_response(note, access, owner_username)

    async def delete_note(self, note_id: UUID, user_id: UUID) -> None:
        """Delete note; only the owner may."""
        await self.access.require(user_id, note_id, is_owner, "delete")

        await self.note_repo.delete_note(note_id)
        logger.info("Note deleted", extra={"note_id": str(note_id), "owner_id": str(user_id)})

    async def list_visible_notes(self, user_id: UUID, query: NoteListQuery) -> NoteListResponse:
        """Owned plus shared notes, filtered per subset, sorted once over the union."""
        owned = await self._owned_responses(user_id, query.search)
        shared = await self._shared_responses(user_id, query.search)

        notes = merge_visible_notes(owned, shared, query.sort, query.order)
        return NoteListResponse(notes=notes)

    async def list_shared_notes(self, user_id: UUID, query: NoteListQuery) -> NoteListResponse:
        """Notes shared with the user."""
        shared = await self._shared_responses(user_id, query.search)
        return NoteListResponse(notes=merge_visible_notes([], shared, query.sort, query.order))

    async def _owned_responses(self, user_id: UUID, search: Optional[str]) -> List[NoteResponse]:
        notes = await self.note_repo.list_owned_notes(user_id, search)
        if not notes:
            return []

        owner = await self.user_repo.get_by_id(user_id)
        username = owner.username if owner else None
        return [self._note_to_response(note, AccessLevel.OWNER, username) for note in notes]

    async def _shared_responses(self, user_id: UUID, search: Optional[str]) -> List[NoteResponse]:
        rows = await self.note_repo.list_shared_notes(user_id, search)
        return [
            self._note_to_response(note, AccessLevel(share.permission), owner_username)
            for note, share, owner_username in rows
        ]

    def _note_to_response(
        self, note: Note, access: AccessLevel, owner_username: Optional[str]
    ) -> NoteResponse:
        """Convert note model to response as seen with ``access``."""
        return NoteResponse(
            id=note.id,
            title=note.title,
            content=note.content,
            color=note.color,
            owner_id=note.owner_id,
            owner_username=owner_username,
            note_type="owner" if access == AccessLevel.OWNER else "shared",
            permission=access.value,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )
