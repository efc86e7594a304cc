"""
Note sharing schemas.

These schemas define the API contracts for granting, listing and revoking
per-user access to a note.
"""

from datetime import datetime
from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

Permission = Literal["read", "edit"]


class ShareRequest(BaseModel):
    """Note sharing request schema."""

    usernames: Union[str, List[str]] = Field(description="One username or a list of usernames")
    permission: Permission = Field(default="read", description="Permission level to grant")

    @field_validator("usernames")
    @classmethod
    def normalize_usernames(cls, v):
        """Accept a single name or a list; strip, reject blanks, drop case-insensitive duplicates."""
        names = [v] if isinstance(v, str) else list(v)
        if not names:
            raise ValueError("At least one username is required")

        cleaned: List[str] = []
        seen = set()
        for name in names:
            name = name.strip()
            if not name:
                raise ValueError("Usernames must not be empty")
            # usernames match regardless of case
            if name.lower() not in seen:
                seen.add(name.lower())
                cleaned.append(name)
        return cleaned

    model_config = ConfigDict(
        json_schema_extra={"example": {"usernames": ["bob", "carol"], "permission": "edit"}}
    )


class ShareSuccess(BaseModel):
    username: str
    action: Literal["shared", "updated"]


class ShareFailure(BaseModel):
    username: str
    reason: Literal["UserNotFound", "SelfShare"]


class ShareResult(BaseModel):
    """Per-username outcome of a share call."""

    message: str
    successful: List[ShareSuccess] = Field(default_factory=list)
    failed: List[ShareFailure] = Field(default_factory=list)


class ShareGrantResponse(BaseModel):
    """One grantee of a note, as listed for its owner."""

    username: str
    email: str
    permission: Permission
    created_at: datetime
    updated_at: datetime


class ShareListResponse(BaseModel):
    shares: List[ShareGrantResponse]
