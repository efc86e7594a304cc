"""Sharing service implementation."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..access import AccessResolver, can_share
from ..errors import NotFoundError, ValidationFailed
from ..logging import get_logger
from ..repositories.share_repository import ShareRepository
from ..repositories.user_repository import UserRepository
from ..schemas.sharing import (
    ShareFailure,
    ShareGrantResponse,
    ShareListResponse,
    ShareRequest,
    ShareResult,
    ShareSuccess,
)
from .interfaces import ISharingService

logger = get_logger("sharing")


class SharingService(ISharingService):
    """Sharing service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.share_repo = ShareRepository(session)
        self.user_repo = UserRepository(session)
        self.access = AccessResolver(session)

    async def share_note(self, user_id: UUID, note_id: UUID, request: ShareRequest) -> ShareResult:
        """Share note with other users.

        Each username is handled on its own: an unknown user or the owner
        lands in ``failed`` without stopping the rest. Only when every entry
        fails is the whole call rejected.
        """
        await self.access.require(user_id, note_id, can_share, "share")

        successful = []
        failed = []
        for username in request.usernames:
            target_user = await self.user_repo.get_by_username(username)
            if not target_user:
                failed.append(ShareFailure(username=username, reason="UserNotFound"))
                continue

            if target_user.id == user_id:
                failed.append(ShareFailure(username=username, reason="SelfShare"))
                continue

            target_id = target_user.id
            _, created = await self.share_repo.upsert_grant(
                note_id, user_id, target_id, request.permission
            )
            successful.append(
                ShareSuccess(username=username, action="shared" if created else "updated")
            )
            logger.info(
                "Note shared",
                extra={
                    "note_id": str(note_id),
                    "grantee_id": str(target_id),
                    "permission": request.permission,
                    "new_grant": created,
                },
            )

        if not successful:
            logger.warning(
                "Share failed for every user", extra={"note_id": str(note_id), "count": len(failed)}
            )
            raise ValidationFailed(
                "Failed to share note with any users",
                details=[failure.model_dump() for failure in failed],
            )

        message = f"Note shared with {len(successful)} user(s)"
        if failed:
            message += f", {len(failed)} failed"

        return ShareResult(message=message, successful=successful, failed=failed)

    async def list_shares(self, user_id: UUID, note_id: UUID) -> ShareListResponse:
        """Enumerate who a note is shared with (owner only)."""
        await self.access.require(user_id, note_id, can_share, "list shares of")

        grants = await self.share_repo.list_note_grants(note_id)
        return ShareListResponse(
            shares=[
                ShareGrantResponse(
                    username=grantee.username,
                    email=grantee.email,
                    permission=share.permission,
                    created_at=share.created_at,
                    updated_at=share.updated_at,
                )
                for share, grantee in grants
            ]
        )

    async def revoke_share(self, user_id: UUID, note_id: UUID, username: str) -> None:
        """Revoke note share for one grantee."""
        await self.access.require(user_id, note_id, can_share, "manage sharing of")

        grantee = await self.user_repo.get_by_username(username)
        if not grantee:
            raise NotFoundError("User not found")

        share = await self.share_repo.get_grant(note_id, grantee.id)
        if not share:
            raise NotFoundError("Share not found")

        await self.share_repo.delete_grant(share)
        logger.info(
            "Share revoked", extra={"note_id": str(note_id), "grantee_id": str(grantee.id)}
        )
