"""Health service implementation."""

import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import Settings, get_settings
from ..logging import get_logger
from ..redis_client import RedisClient
from ..schemas.common import HealthCheckResponse
from .interfaces import IHealthService

logger = get_logger("health")


class HealthService(IHealthService):
    """Health check service implementation."""

    def __init__(
        self,
        session: AsyncSession,
        redis_client: Optional[RedisClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.session = session
        self.redis_client = redis_client
        self.settings = settings or get_settings()

    async def get_health_status(self) -> HealthCheckResponse:
        """Database down is unhealthy; Redis down only degrades rate limiting."""
        db_health = await self.check_database_health()
        redis_health = await self.check_redis_health()

        if not db_health["connected"]:
            overall_status = "unhealthy"
        elif not redis_health["connected"]:
            overall_status = "degraded"
        else:
            overall_status = "healthy"

        return HealthCheckResponse(
            status=overall_status,
            timestamp=datetime.now(timezone.utc),
            version=self.settings.app_version,
            checks={"database": db_health, "redis": redis_health},
        )

    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        try:
            start_time = time.perf_counter()
            result = await self.session.execute(text("SELECT 1"))
            result.scalar()
            response_time = (time.perf_counter() - start_time) * 1000

            return {
                "connected": True,
                "status": "healthy",
                "response_time_ms": round(response_time, 2),
            }
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return {
                "connected": False,
                "status": "unhealthy",
                "error": str(e),
                "response_time_ms": 0.0,
            }

    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
        if self.redis_client is None or not self.redis_client.connected:
            return {"connected": False, "status": "unavailable", "response_time_ms": None}

        start_time = time.perf_counter()
        ok = await self.redis_client.ping()
        response_time = (time.perf_counter() - start_time) * 1000

        return {
            "connected": ok,
            "status": "healthy" if ok else "unhealthy",
            "response_time_ms": round(response_time, 2) if ok else None,
        }
