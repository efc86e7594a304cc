"""
Database models.

SQLAlchemy ORM models for users, their notes and the grants that share a
note with other users.

Models included:
    - User: account with username, email and password hash
    - Note: owned note with title, content and color
    - Share: one (note, grantee) grant with read or edit permission
"""

from .base import BaseModel
from .note import DEFAULT_NOTE_COLOR, NOTE_COLORS, Note
from .share import Share, SharePermission
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
    "NOTE_COLORS",
    "DEFAULT_NOTE_COLOR",
    "Share",
    "SharePermission",
]
