"""Share repository for database operations."""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.share import Share
from ..models.user import User

logger = logging.getLogger(__name__)


class ShareRepository:
    """Repository for share (grant) database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_grant(self, note_id: UUID, grantee_id: UUID) -> Optional[Share]:
        """Get the grant for a (note, grantee) pair."""
        stmt = select(Share).where(Share.note_id == note_id, Share.grantee_id == grantee_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_permission(self, note_id: UUID, grantee_id: UUID) -> Optional[str]:
        """Permission string of the grant, or None when there is none."""
        stmt = select(Share.permission).where(
            Share.note_id == note_id, Share.grantee_id == grantee_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert_grant(
        self, note_id: UUID, owner_id: UUID, grantee_id: UUID, permission: str
    ) -> Tuple[Share, bool]:
        """Create the grant or update its permission. Returns (grant, created)."""
        existing = await self.get_grant(note_id, grantee_id)
        if existing:
            return await self._set_permission(existing, permission), False

        share = Share(
            note_id=note_id, owner_id=owner_id, grantee_id=grantee_id, permission=permission
        )
        self.session.add(share)
        try:
            await self.session.commit()
        except IntegrityError:
            # another request inserted the same pair first; last write wins
            await self.session.rollback()
            existing = await self.get_grant(note_id, grantee_id)
            if existing is None:
                raise
            logger.info(f"Concurrent grant for note {note_id}, updating instead")
            return await self._set_permission(existing, permission), False

        await self.session.refresh(share)
        return share, True

    async def _set_permission(self, share: Share, permission: str) -> Share:
        share.permission = permission
        await self.session.commit()
        await self.session.refresh(share)
        return share

    async def list_note_grants(self, note_id: UUID) -> List[Tuple[Share, User]]:
        """Grants on a note with their grantee, ordered by username."""
        stmt = (
            select(Share, User)
            .join(User, User.id == Share.grantee_id)
            .where(Share.note_id == note_id)
            .order_by(User.username)
        )
        result = await self.session.execute(stmt)
        return [(share, user) for share, user in result.all()]

    async def delete_grant(self, share: Share) -> None:
        """Revoke a grant."""
        await self.session.delete(share)
        await self.session.commit()
