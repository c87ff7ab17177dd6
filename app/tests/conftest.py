# ===========================================================================
# File: app/tests/conftest.py
# ===========================================================================
import os

# Settings dibaca saat import, jadi env harus diset sebelum import app
os.environ.setdefault("SECRET_KEY", "test-secret-key-news-api-0123456789abcdef0123")
os.environ.setdefault("MONGODB_DB_NAME", "news_test_db")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from httpx import AsyncClient, ASGITransport
from typing import AsyncGenerator, Dict
from mongomock_motor import AsyncMongoMockClient

from app.main import app
from app.core.config import settings, logger
from app.core.security import create_access_token
from app.db.session import get_db as app_get_db
from app.db.redis_conn import get_redis_cache_client as app_get_redis_cache_client
from app.crud.crud_user import crud_user
from app.models.user import UserInDB

logger.info("--- RUNNING IN TESTING MODE (conftest.py) ---")


@pytest.fixture
def test_db():
    client = AsyncMongoMockClient()
    return client[settings.MONGODB_DB_NAME]


@pytest.fixture
async def async_test_client(test_db) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db():
        return test_db

    async def override_get_redis_cache_client():
        # Tanpa Redis: pointer selalu dibaca dari MongoDB
        return None

    app.dependency_overrides[app_get_db] = override_get_db
    app.dependency_overrides[app_get_redis_cache_client] = override_get_redis_cache_client
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()


def auth_headers_for(user: UserInDB) -> Dict[str, str]:
    token = create_access_token(subject=user.username, user_id=str(user.id))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def test_user(test_db) -> UserInDB:
    user = await crud_user.create_user(test_db, username="reader_one")
    logger.debug(f"Created test user: {user.username} with ID {user.id}")
    return user


@pytest.fixture
async def test_admin(test_db) -> UserInDB:
    admin = await crud_user.create_user(test_db, username="news_admin", is_admin=True)
    logger.debug(f"Created test admin: {admin.username} with ID {admin.id}")
    return admin


@pytest.fixture
def test_user_auth_headers(test_user: UserInDB) -> Dict[str, str]:
    return auth_headers_for(test_user)


@pytest.fixture
def test_admin_auth_headers(test_admin: UserInDB) -> Dict[str, str]:
    return auth_headers_for(test_admin)
