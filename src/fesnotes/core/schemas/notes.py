"""
Note management schemas.

These schemas define the API contracts for note CRUD and the combined
owned + shared note listing.
"""

import uuid
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

NoteColor = Literal["yellow", "pink", "blue", "green", "purple", "orange"]
NoteType = Literal["owner", "shared"]
SortField = Literal["created_at", "updated_at", "title"]
SortOrder = Literal["asc", "desc"]


def _not_blank(v: str) -> str:
    if len(v.strip()) == 0:
        raise ValueError("must not be empty")
    return v


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: str = Field(min_length=1, max_length=255, description="Note title")
    content: str = Field(min_length=1, description="Note content")
    color: NoteColor = Field(default="yellow", description="Card color")

    @field_validator("title", "content")
    @classmethod
    def validate_not_blank(cls, v):
        return _not_blank(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"title": "Groceries", "content": "Milk, eggs, bread", "color": "green"}
        }
    )


class NoteUpdate(BaseModel):
    """Note update request schema; a missing color keeps the stored one."""

    title: str = Field(min_length=1, max_length=255, description="Note title")
    content: str = Field(min_length=1, description="Note content")
    color: Optional[NoteColor] = Field(default=None, description="Card color")

    @field_validator("title", "content")
    @classmethod
    def validate_not_blank(cls, v):
        return _not_blank(v)


class NoteResponse(BaseModel):
    """Note as seen by the current user."""

    id: uuid.UUID = Field(description="Note unique identifier")
    title: str
    content: str
    color: str

    owner_id: uuid.UUID = Field(description="Note owner ID")
    owner_username: Optional[str] = Field(default=None, description="Note owner username")
    note_type: NoteType = Field(description="'owner' for own notes, 'shared' otherwise")
    permission: Literal["owner", "edit", "read"] = Field(
        description="Effective access of the current user"
    )

    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NoteEnvelope(BaseModel):
    note: NoteResponse


class NoteMutationResponse(BaseModel):
    message: str
    note: NoteResponse


class NoteListResponse(BaseModel):
    notes: List[NoteResponse]


class NoteListQuery(BaseModel):
    """Search and ordering for note listings."""

    search: Optional[str] = Field(default=None, description="Case-insensitive substring")
    sort: SortField = Field(default="created_at")
    order: SortOrder = Field(default="desc")

    @field_validator("order", mode="before")
    @classmethod
    def normalize_order(cls, v):
        return v.lower() if isinstance(v, str) else v

    @field_validator("search")
    @classmethod
    def normalize_search(cls, v):
        if v is None:
            return None
        v = v.strip()
        return v or None
