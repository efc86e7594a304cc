"""Per-client fixed-window rate limiting backed by Redis."""

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.errors import error_body
from ..core.logging import get_logger

logger = get_logger("rate_limit")


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject a client address once it exceeds the configured request budget."""

    async def dispatch(self, request: Request, call_next):
        settings = request.app.state.settings
        redis_client = getattr(request.app.state, "redis", None)
        if redis_client is None:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        key = f"ratelimit:{client_ip}"
        count = await redis_client.increment_rate_limit(
            key, expire=settings.rate_limit_window_seconds
        )

        if count > settings.rate_limit_requests:
            retry_after = await redis_client.get_rate_limit_ttl(key)
            logger.warning(
                "Rate limit exceeded",
                extra={"client_ip": client_ip, "count": count, "path": request.url.path},
            )
            return JSONResponse(
                status_code=429,
                content=error_body("Too many requests, please try again later"),
                headers={"Retry-After": str(retry_after or settings.rate_limit_window_seconds)},
            )

        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(settings.rate_limit_requests)
        response.headers["X-RateLimit-Remaining"] = str(
            max(settings.rate_limit_requests - count, 0)
        )
        return response
