"""Authentication API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import AuthResponse, LoginRequest, ProfileResponse, RegisterRequest
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest, request: Request, session: AsyncSession = Depends(get_db_session)
):
    """Register a new user and get a token."""
    auth_service = AuthService(session, request.app.state.settings)
    return await auth_service.register_user(payload)


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest, request: Request, session: AsyncSession = Depends(get_db_session)
):
    """Login user and get a token."""
    auth_service = AuthService(session, request.app.state.settings)
    return await auth_service.authenticate_user(payload)


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get current user profile."""
    auth_service = AuthService(session)
    return await auth_service.get_profile(current_user_id)
