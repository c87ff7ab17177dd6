# ===========================================================================
# File: app/db/redis_conn.py
# ===========================================================================
import redis.asyncio as aioredis
from typing import Optional
from app.core.config import settings, logger

class RedisManager:
    redis_client: Optional[aioredis.Redis] = None

    async def connect_to_redis(self):
        if self.redis_client is None:
            logger.info(f"Attempting to connect to Redis at {settings.REDIS_HOST}:{settings.REDIS_PORT} (DB: {settings.REDIS_DB_CACHE}) for cache...")
            try:
                self.redis_client = aioredis.from_url(
                    settings.CACHE_REDIS_URL,
                    encoding="utf-8",
                    decode_responses=True
                )
                await self.redis_client.ping()
                logger.info("Successfully connected to Redis cache.")
            except Exception as e:
                # Cache is optional, service runs against MongoDB alone
                logger.error(f"Could not connect to Redis cache: {e}", exc_info=True)
                self.redis_client = None

    async def close_redis_connection(self):
        if self.redis_client:
            logger.info("Closing Redis cache connection...")
            await self.redis_client.aclose()
            logger.info("Redis cache connection closed.")
            self.redis_client = None

redis_manager = RedisManager()

async def get_redis_cache_client() -> Optional[aioredis.Redis]:
    if redis_manager.redis_client is None:
        logger.debug("Redis cache client unavailable, falling back to MongoDB reads.")
    return redis_manager.redis_client
