"""Repository layer for data access."""

from .note_repository import NoteRepository
from .share_repository import ShareRepository
from .user_repository import UserRepository

__all__ = [
    "UserRepository",
    "NoteRepository",
    "ShareRepository",
]
