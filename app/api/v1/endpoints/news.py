# ===========================================================================
# File: app/api/v1/endpoints/news.py
# ===========================================================================
from fastapi import APIRouter, Depends, status as HttpStatus
from motor.motor_asyncio import AsyncIOMotorDatabase
import redis.asyncio as aioredis
from typing import List, Optional

from app.db.session import get_db
from app.db.redis_conn import get_redis_cache_client
from app.api.deps import get_current_active_user, get_current_active_admin_user, get_current_user_optional
from app.api.v1.schemas.news import NewsPostCreate, NewsPostUpdate, NewsPostPublic
from app.models.user import UserInDB
from app.services.news_service import news_service
from app.core.config import logger

router = APIRouter()

@router.get("", response_model=List[NewsPostPublic], summary="Get Latest News Announcement")
async def get_news(
    db: AsyncIOMotorDatabase = Depends(get_db),
    current_user: Optional[UserInDB] = Depends(get_current_user_optional)
):
    """
    Mengambil announcement terbaru. Contributor admin juga melihat post yang
    belum published atau masih terjadwal.
    """
    is_admin = bool(current_user and current_user.is_contributor_admin)
    return await news_service.get_news(db, is_admin=is_admin)

@router.post("", response_model=NewsPostPublic, status_code=HttpStatus.HTTP_201_CREATED, summary="Create News Post (Admin)")
async def create_news(
    *,
    db: AsyncIOMotorDatabase = Depends(get_db),
    post_in: NewsPostCreate,
    redis_client: Optional[aioredis.Redis] = Depends(get_redis_cache_client),
    admin_user: UserInDB = Depends(get_current_active_admin_user)
):
    logger.info(f"Admin {admin_user.username} creating news post '{post_in.title}'")
    return await news_service.create_post(db, post_in=post_in, redis_client=redis_client)

@router.post("/read", summary="Mark Latest News Announcement as Read")
async def mark_news_read(
    db: AsyncIOMotorDatabase = Depends(get_db),
    redis_client: Optional[aioredis.Redis] = Depends(get_redis_cache_client),
    current_user: UserInDB = Depends(get_current_active_user)
):
    await news_service.mark_news_read(db, user=current_user, redis_client=redis_client)
    return {}

@router.post("/tell-me-later", summary="Get Reminded About the Latest News Later")
async def tell_me_later_news(
    db: AsyncIOMotorDatabase = Depends(get_db),
    redis_client: Optional[aioredis.Redis] = Depends(get_redis_cache_client),
    current_user: UserInDB = Depends(get_current_active_user)
):
    await news_service.tell_me_later(db, user=current_user, redis_client=redis_client)
    return {}

@router.put("/{post_id}", response_model=NewsPostPublic, summary="Update News Post (Admin)")
async def update_news(
    *,
    db: AsyncIOMotorDatabase = Depends(get_db),
    post_id: str,
    post_update: NewsPostUpdate,
    redis_client: Optional[aioredis.Redis] = Depends(get_redis_cache_client),
    admin_user: UserInDB = Depends(get_current_active_admin_user)
):
    logger.info(f"Admin {admin_user.username} updating news post {post_id}")
    return await news_service.update_post(db, post_id=post_id, post_update=post_update, redis_client=redis_client)

@router.delete("/{post_id}", summary="Delete News Post (Admin)")
async def delete_news(
    *,
    db: AsyncIOMotorDatabase = Depends(get_db),
    post_id: str,
    admin_user: UserInDB = Depends(get_current_active_admin_user)
):
    logger.info(f"Admin {admin_user.username} deleting news post {post_id}")
    await news_service.delete_post(db, post_id=post_id)
    return {}
