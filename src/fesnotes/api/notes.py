"""Notes API endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.schemas.notes import (
    NoteCreate,
    NoteEnvelope,
    NoteListQuery,
    NoteListResponse,
    NoteMutationResponse,
    NoteUpdate,
    SortField,
)
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


def list_query(
    search: Optional[str] = Query(None, max_length=255, description="Match in title or content"),
    sort: SortField = Query("created_at", description="Sort field"),
    order: str = Query("desc", pattern="^(?i:asc|desc)$", description="asc or desc"),
) -> NoteListQuery:
    """Search/sort query parameters shared by the list endpoints."""
    return NoteListQuery(search=search, sort=sort, order=order)


@router.get("", response_model=NoteListResponse)
async def list_notes(
    query: NoteListQuery = Depends(list_query),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List owned and shared notes together."""
    note_service = NoteService(session)
    return await note_service.list_visible_notes(current_user_id, query)


# declared before /{note_id} so "shared" is not parsed as an id
@router.get("/shared", response_model=NoteListResponse)
async def list_shared_notes(
    query: NoteListQuery = Depends(list_query),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List notes other users shared with me."""
    note_service = NoteService(session)
    return await note_service.list_shared_notes(current_user_id, query)


@router.post("", response_model=NoteMutationResponse, status_code=201)
async def create_note(
    request: NoteCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    note = await note_service.create_note(current_user_id, request)
    return NoteMutationResponse(message="Note created successfully", note=note)


@router.get("/{note_id}", response_model=NoteEnvelope)
async def get_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note (owned or shared with me)."""
    note_service = NoteService(session)
    return NoteEnvelope(note=await note_service.get_note(note_id, current_user_id))


@router.put("/{note_id}", response_model=NoteMutationResponse)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note (owner or edit grantee)."""
    note_service = NoteService(session)
    note = await note_service.update_note(note_id, current_user_id, request)
    return NoteMutationResponse(message="Note updated successfully", note=note)


@router.delete("/{note_id}", response_model=MessageResponse)
async def delete_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note (owner only)."""
    note_service = NoteService(session)
    await note_service.delete_note(note_id, current_user_id)
    return MessageResponse(message="Note deleted successfully")
