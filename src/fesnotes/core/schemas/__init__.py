"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UserProfile,
    UserPublic,
)
from .common import ErrorResponse, HealthCheckResponse, MessageResponse
from .notes import (
    NoteCreate,
    NoteEnvelope,
    NoteListQuery,
    NoteListResponse,
    NoteMutationResponse,
    NoteResponse,
    NoteUpdate,
)
from .sharing import (
    ShareFailure,
    ShareGrantResponse,
    ShareListResponse,
    ShareRequest,
    ShareResult,
    ShareSuccess,
)

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "LoginRequest",
    "UserPublic",
    "UserProfile",
    "AuthResponse",
    "ProfileResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteEnvelope",
    "NoteMutationResponse",
    "NoteListResponse",
    "NoteListQuery",
    # Sharing schemas
    "ShareRequest",
    "ShareSuccess",
    "ShareFailure",
    "ShareResult",
    "ShareGrantResponse",
    "ShareListResponse",
    # Common schemas
    "ErrorResponse",
    "MessageResponse",
    "HealthCheckResponse",
]
