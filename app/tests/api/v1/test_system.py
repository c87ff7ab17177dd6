# ===========================================================================
# File: app/tests/api/v1/test_system.py
# ===========================================================================
import pytest
from unittest.mock import AsyncMock, MagicMock
from httpx import AsyncClient
from fastapi import status as HttpStatus
from redis.exceptions import ConnectionError as RedisConnectionError

from app.main import app
from app.core.config import settings
from app.db.session import get_db as app_get_db
from app.db.redis_conn import get_redis_cache_client as app_get_redis_cache_client

pytestmark = pytest.mark.asyncio

HEALTH_URL = f"{settings.API_V1_STR}/system/health"


def _override(db_ping_error=None, redis_client=None):
    db = MagicMock()
    db.command = AsyncMock(side_effect=db_ping_error, return_value={"ok": 1})

    async def override_get_db():
        return db

    async def override_get_redis_cache_client():
        return redis_client

    app.dependency_overrides[app_get_db] = override_get_db
    app.dependency_overrides[app_get_redis_cache_client] = override_get_redis_cache_client


async def test_health_ok_without_redis(async_test_client: AsyncClient):
    _override()
    response = await async_test_client.get(HEALTH_URL)
    assert response.status_code == HttpStatus.HTTP_200_OK
    assert response.json() == {"status": "healthy", "services": {"mongodb": "connected", "redis": "disabled"}}


async def test_health_reports_redis_errors_but_stays_healthy(async_test_client: AsyncClient):
    redis_client = AsyncMock()
    redis_client.ping.side_effect = RedisConnectionError("redis down")
    _override(redis_client=redis_client)

    response = await async_test_client.get(HEALTH_URL)
    assert response.status_code == HttpStatus.HTTP_200_OK
    assert response.json()["services"]["redis"] == "error"


async def test_health_unhealthy_when_mongo_is_down(async_test_client: AsyncClient):
    _override(db_ping_error=ConnectionError("mongo down"))
    response = await async_test_client.get(HEALTH_URL)
    assert response.status_code == HttpStatus.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["status"] == "unhealthy"


async def test_root_lists_api_path(async_test_client: AsyncClient):
    response = await async_test_client.get("/")
    assert response.status_code == HttpStatus.HTTP_200_OK
    assert response.json()["api_v1_path"] == settings.API_V1_STR
