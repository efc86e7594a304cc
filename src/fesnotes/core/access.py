"""
Effective access of a user on a note.

``AccessResolver`` is the one place that decides whether a user may read,
write or manage sharing of a note; every per-note service call goes
through it before touching the store.
"""

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from .errors import AuthorizationError, NotFoundError
from .logging import get_logger
from .models.note import Note
from .repositories.note_repository import NoteRepository
from .repositories.share_repository import ShareRepository
from .schemas.notes import NoteResponse

logger = get_logger("access")


class AccessLevel(str, Enum):
    OWNER = "owner"
    EDIT = "edit"
    READ = "read"
    NONE = "none"


def can_read(access: AccessLevel) -> bool:
    return access in (AccessLevel.OWNER, AccessLevel.EDIT, AccessLevel.READ)


def can_write(access: AccessLevel) -> bool:
    return access in (AccessLevel.OWNER, AccessLevel.EDIT)


def is_owner(access: AccessLevel) -> bool:
    return access == AccessLevel.OWNER


def can_share(access: AccessLevel) -> bool:
    """Only the owner manages grants (create, update, revoke, enumerate)."""
    return is_owner(access)


class AccessResolver:
    """Resolves ownership and grants into an ``AccessLevel``."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.share_repo = ShareRepository(session)

    async def resolve_access(
        self, user_id: UUID, note_id: UUID
    ) -> Tuple[Optional[Note], AccessLevel]:
        """Return the note (None if it does not exist) and the user's access."""
        note = await self.note_repo.get_by_id(note_id)
        if note is None:
            return None, AccessLevel.NONE

        if note.owner_id == user_id:
            return note, AccessLevel.OWNER

        permission = await self.share_repo.get_permission(note_id, user_id)
        if permission is None:
            return note, AccessLevel.NONE

        return note, AccessLevel(permission)

    async def require(
        self, user_id: UUID, note_id: UUID, check, action: str
    ) -> Tuple[Note, AccessLevel]:
        """Resolve access and fail unless ``check(access)`` holds.

        Strangers (and missing notes) get 404 so existence is not revealed;
        grantees short of the needed level get 403.
        """
        note, access = await self.resolve_access(user_id, note_id)
        if note is None or access == AccessLevel.NONE:
            raise NotFoundError("Note not found")

        if not check(access):
            logger.warning(
                "Access denied",
                extra={
                    "user_id": str(user_id),
                    "note_id": str(note_id),
                    "access": access.value,
                    "action": action,
                },
            )
            raise AuthorizationError(f"Not allowed to {action} this note")

        return note, access


def _sort_key(sort_by: str):
    if sort_by == "title":
        return lambda item: item.title.lower()
    return lambda item: getattr(item, sort_by)


def merge_visible_notes(
    owned: Iterable[NoteResponse],
    shared: Iterable[NoteResponse],
    sort_by: str = "created_at",
    order: str = "desc",
) -> List[NoteResponse]:
    """Combine owned and shared notes and sort the combined set once."""
    combined: Sequence[NoteResponse] = [*owned, *shared]
    return sorted(combined, key=_sort_key(sort_by), reverse=order == "desc")
