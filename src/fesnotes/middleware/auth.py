"""Authentication dependency."""

from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.errors import AuthenticationError
from ..security import get_user_id_from_token


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication; failures are 401."""

    def __init__(self):
        # errors are raised here so they all come out as 401
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> UUID:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        # None for a missing header and for a non-Bearer scheme alike
        if not credentials or not credentials.credentials:
            raise AuthenticationError("Access token required")

        user_id = get_user_id_from_token(credentials.credentials, request.app.state.settings)
        if not user_id:
            raise AuthenticationError("Invalid or expired token")

        return user_id


# Dependency for getting current user ID from JWT
async def get_current_user_id(user_id: UUID = Depends(JWTBearer())) -> UUID:
    """Get current authenticated user ID."""
    return user_id
