"""Sharing API endpoints (owner only)."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.schemas.sharing import ShareListResponse, ShareRequest, ShareResult
from ..core.services import SharingService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(
    prefix="/notes/{note_id}",
    tags=["sharing"],
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)


@router.post("/share", response_model=ShareResult)
async def share_note(
    note_id: UUID,
    request: ShareRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Share a note with one or more users."""
    sharing_service = SharingService(session)
    return await sharing_service.share_note(current_user_id, note_id, request)


@router.get("/shares", response_model=ShareListResponse)
async def list_shares(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List who a note is shared with."""
    sharing_service = SharingService(session)
    return await sharing_service.list_shares(current_user_id, note_id)


@router.delete("/shares/{username}", response_model=MessageResponse)
async def revoke_share(
    note_id: UUID,
    username: str,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Revoke one user's access to a note."""
    sharing_service = SharingService(session)
    await sharing_service.revoke_share(current_user_id, note_id, username)
    return MessageResponse(message=f"Stopped sharing note with {username}")
