"""
Authentication schemas.

These schemas define the API contracts for registration, login and the
public user record returned alongside every issued token.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class RegisterRequest(BaseModel):
    """User registration request schema."""

    username: str = Field(min_length=3, max_length=50, description="Unique username")
    email: EmailStr = Field(description="Unique email address")
    password: str = Field(min_length=6, max_length=128, description="User password")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        """Validate username format."""
        if not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError("Username can only contain letters, numbers, hyphens, and underscores")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "email": "alice@example.com",
                "password": "secret1",
            }
        }
    )


class LoginRequest(BaseModel):
    """User login request schema."""

    email: EmailStr = Field(description="Account email")
    password: str = Field(min_length=1, max_length=128, description="User password")

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "alice@example.com", "password": "secret1"}}
    )


class UserPublic(BaseModel):
    """Public user record (never carries the password hash)."""

    id: uuid.UUID
    username: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class UserProfile(UserPublic):
    created_at: Optional[datetime] = None


class AuthResponse(BaseModel):
    """Token issued on register/login."""

    message: str
    token: str = Field(description="Signed bearer token, valid for 7 days")
    user: UserPublic

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Login successful",
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "user": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "username": "alice",
                    "email": "alice@example.com",
                },
            }
        }
    )


class ProfileResponse(BaseModel):
    user: UserProfile
