# ===========================================================================
# File: app/api/v1/endpoints/system.py
# ===========================================================================
from fastapi import APIRouter, Depends, status as HttpStatus
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase
import redis.asyncio as aioredis
from typing import Optional

from app.db.session import get_db
from app.db.redis_conn import get_redis_cache_client
from app.core.config import logger

router = APIRouter()

@router.get("/health", summary="Check API Health Status")
async def health_check(
    current_db: AsyncIOMotorDatabase = Depends(get_db),
    current_redis: Optional[aioredis.Redis] = Depends(get_redis_cache_client)
):
    """
    Ping MongoDB dan Redis. Redis hanya cache, jadi service tetap dianggap
    sehat selama MongoDB terhubung.
    """
    mongo_ok = False
    redis_status = "disabled"
    try:
        await current_db.command('ping')
        mongo_ok = True
    except Exception as e:
        logger.error(f"MongoDB ping failed: {e}")

    if current_redis is not None:
        try:
            await current_redis.ping()
            redis_status = "connected"
        except Exception as e:
            logger.error(f"Redis ping failed: {e}")
            redis_status = "error"

    services = {"mongodb": "connected" if mongo_ok else "error", "redis": redis_status}
    if mongo_ok:
        return {"status": "healthy", "services": services}
    return JSONResponse(
        status_code=HttpStatus.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy", "services": services}
    )
