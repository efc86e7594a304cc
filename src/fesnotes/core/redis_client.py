"""Redis client for per-client rate limiting counters."""

import logging
from typing import Optional

import redis.asyncio as redis

from ..config import Settings, get_settings

logger = logging.getLogger(__name__)


class RedisClient:
    """Thin async Redis wrapper; every call degrades to a no-op when offline."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.redis: Optional[redis.Redis] = None

    @property
    def connected(self) -> bool:
        return self.redis is not None

    async def connect(self) -> None:
        """Connect to Redis."""
        client = redis.from_url(
            self.settings.redis_url,
            max_connections=self.settings.redis_max_connections,
            decode_responses=True,
        )
        try:
            await client.ping()
        except Exception as e:
            logger.error(f"Failed to connect to Redis: {e}")
            await client.aclose()
            raise
        self.redis = client
        logger.info("Connected to Redis successfully")

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            logger.info("Disconnected from Redis")

    async def ping(self) -> bool:
        if not self.redis:
            return False
        try:
            return bool(await self.redis.ping())
        except Exception as e:
            logger.error(f"Redis PING error: {e}")
            return False

    # Rate limiting
    async def increment_rate_limit(self, key: str, expire: int = 60) -> int:
        """Increment a fixed-window counter, starting the window on first hit."""
        if not self.redis:
            return 0
        try:
            async with self.redis.pipeline(transaction=True) as pipe:
                pipe.incr(key)
                pipe.expire(key, expire, nx=True)
                results = await pipe.execute()
            return int(results[0]) if results else 0
        except Exception as e:
            logger.error(f"Rate limit error for key {key}: {e}")
            return 0

    async def get_rate_limit_ttl(self, key: str) -> int:
        """Seconds left in the current window (0 if unknown)."""
        if not self.redis:
            return 0
        try:
            ttl = await self.redis.ttl(key)
            return max(int(ttl), 0)
        except Exception as e:
            logger.error(f"Rate limit TTL error for key {key}: {e}")
            return 0
