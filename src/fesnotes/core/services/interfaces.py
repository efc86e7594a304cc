"""
Service interfaces for Fes Notes.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict
from uuid import UUID

from ..schemas.auth import AuthResponse, LoginRequest, ProfileResponse, RegisterRequest
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import (
    NoteCreate,
    NoteListQuery,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
)
from ..schemas.sharing import ShareListResponse, ShareRequest, ShareResult


class IAuthService(ABC):
    """Auth service for user management."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user and issue a token."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login user and issue a token."""
        pass

    @abstractmethod
    async def get_profile(self, user_id: UUID) -> ProfileResponse:
        """Get public profile of the user."""
        pass


class INoteService(ABC):
    """Note service for CRUD operations."""

    @abstractmethod
    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def get_note(self, note_id: UUID, user_id: UUID) -> NoteResponse:
        """Get note by ID (owned or shared)."""
        pass

    @abstractmethod
    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Update note as owner or edit grantee."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID, user_id: UUID) -> None:
        """Delete note (owner only)."""
        pass

    @abstractmethod
    async def list_visible_notes(self, user_id: UUID, query: NoteListQuery) -> NoteListResponse:
        """Owned and shared notes, sorted together."""
        pass

    @abstractmethod
    async def list_shared_notes(self, user_id: UUID, query: NoteListQuery) -> NoteListResponse:
        """Notes shared with the user."""
        pass


class ISharingService(ABC):
    """Note sharing service."""

    @abstractmethod
    async def share_note(self, user_id: UUID, note_id: UUID, request: ShareRequest) -> ShareResult:
        """Grant access to a note to one or more users."""
        pass

    @abstractmethod
    async def list_shares(self, user_id: UUID, note_id: UUID) -> ShareListResponse:
        """Enumerate grantees of a note."""
        pass

    @abstractmethod
    async def revoke_share(self, user_id: UUID, note_id: UUID, username: str) -> None:
        """Revoke one grantee."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass

    @abstractmethod
    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
        pass
