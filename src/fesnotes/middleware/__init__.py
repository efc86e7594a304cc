"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, get_current_user_id
from .rate_limit import RateLimitMiddleware

__all__ = ["get_current_user_id", "JWTBearer", "RateLimitMiddleware"]
