"""Authentication service implementation."""

from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import Settings, get_settings
from ...security import create_access_token, hash_password, needs_update, verify_password
from ..errors import AuthenticationError, ConflictError, NotFoundError
from ..logging import get_logger
from ..repositories.user_repository import UserRepository
from ..schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UserProfile,
    UserPublic,
)
from .interfaces import IAuthService

logger = get_logger("auth")

USER_EXISTS = "User already exists with this email or username"
# same message for unknown email and wrong password
INVALID_CREDENTIALS = "Invalid credentials"


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession, settings: Optional[Settings] = None):
        self.session = session
        self.settings = settings or get_settings()
        self.user_repo = UserRepository(session)

    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user."""
        if await self.user_repo.exists_with_username_or_email(request.username, request.email):
            raise ConflictError(USER_EXISTS)

        user_data = {
            "username": request.username,
            "email": request.email,
            "password_hash": hash_password(request.password),
        }

        try:
            user = await self.user_repo.create_user(user_data)
        except IntegrityError:
            # lost a race with a concurrent registration
            await self.session.rollback()
            raise ConflictError(USER_EXISTS)

        logger.info("User registered", extra={"user_id": str(user.id), "username": user.username})

        return AuthResponse(
            message="User created successfully",
            token=create_access_token(user.id, user.email, settings=self.settings),
            user=UserPublic.model_validate(user),
        )

    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login user and return a fresh token."""
        user = await self.user_repo.get_by_email(request.email)
        if not user or not verify_password(request.password, user.password_hash):
            logger.warning("Failed login attempt", extra={"email": request.email})
            raise AuthenticationError(INVALID_CREDENTIALS)

        if needs_update(user.password_hash):
            await self.user_repo.update_password_hash(user.id, hash_password(request.password))

        return AuthResponse(
            message="Login successful",
            token=create_access_token(user.id, user.email, settings=self.settings),
            user=UserPublic.model_validate(user),
        )

    async def get_profile(self, user_id: UUID) -> ProfileResponse:
        """Get user by ID."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        return ProfileResponse(user=UserProfile.model_validate(user))
