# ===========================================================================
# File: app/services/news_service.py
# ===========================================================================
from motor.motor_asyncio import AsyncIOMotorDatabase
import redis.asyncio as aioredis
from typing import List, Optional
from datetime import datetime
from bson import ObjectId
import json

from app.core.config import settings, logger
from app.core.exceptions import NotFound, PostIdRequired
from app.crud.crud_news import crud_news_post, crud_last_news_post
from app.crud.crud_user import crud_user
from app.models.base import parse_object_id
from app.models.news import NewsPostInDB, LastNewsPostPointer
from app.models.user import UserInDB, NEW_STUFF_NOTIFICATION
from app.api.v1.schemas.news import NewsPostCreate, NewsPostUpdate, NewsPostPublic

LAST_NEWS_POST_CACHE_KEY = "news:last_post"

class NewsService:
    def _resolve_post_id(self, post_id: Optional[str]) -> ObjectId:
        if post_id is None or not post_id.strip():
            raise PostIdRequired()
        object_id = parse_object_id(post_id.strip())
        if object_id is None:
            logger.warning(f"News post id '{post_id}' is not a valid ObjectId.")
            raise NotFound("News post not found.")
        return object_id

    # --- Latest pointer ---

    async def _read_cached_pointer(self, redis_client: Optional[aioredis.Redis]) -> Optional[LastNewsPostPointer]:
        if redis_client is None:
            return None
        try:
            cached = await redis_client.get(LAST_NEWS_POST_CACHE_KEY)
        except Exception as e:
            logger.error(f"Redis get failed for {LAST_NEWS_POST_CACHE_KEY}: {e}")
            return None
        if not cached:
            return None
        try:
            return LastNewsPostPointer.model_validate(json.loads(cached))
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning(f"Failed to parse cached pointer: {e}. Reading from DB.")
            return None

    async def _cache_pointer(self, redis_client: Optional[aioredis.Redis], pointer: LastNewsPostPointer) -> bool:
        if redis_client is None:
            return False
        try:
            await redis_client.set(
                LAST_NEWS_POST_CACHE_KEY,
                pointer.model_dump_json(by_alias=True),
                ex=settings.NEWS_POINTER_CACHE_TTL_SECONDS,
            )
            return True
        except Exception as e:
            logger.error(f"Redis set failed for {LAST_NEWS_POST_CACHE_KEY}: {e}")
            return False

    async def _invalidate_cached_pointer(self, redis_client: Optional[aioredis.Redis]) -> None:
        if redis_client is None:
            return
        try:
            await redis_client.delete(LAST_NEWS_POST_CACHE_KEY)
        except Exception as e:
            logger.error(f"Redis delete failed for {LAST_NEWS_POST_CACHE_KEY}: {e}")

    async def get_last_news_post(
        self, db: AsyncIOMotorDatabase, redis_client: Optional[aioredis.Redis] = None
    ) -> LastNewsPostPointer:
        pointer = await self._read_cached_pointer(redis_client)
        if pointer is not None:
            return pointer
        pointer = await crud_last_news_post.get(db)
        await self._cache_pointer(redis_client, pointer)
        return pointer

    async def last_news_post_id(
        self, db: AsyncIOMotorDatabase, redis_client: Optional[aioredis.Redis] = None
    ) -> Optional[str]:
        pointer = await self.get_last_news_post(db, redis_client)
        return str(pointer.postId) if pointer.postId else None

    async def update_last_news_post_id(
        self, db: AsyncIOMotorDatabase, *, post_id: ObjectId, publish_date: datetime,
        redis_client: Optional[aioredis.Redis] = None
    ) -> LastNewsPostPointer:
        # Cache lama dibuang dulu supaya pembaca tidak dapat pointer basi
        await self._invalidate_cached_pointer(redis_client)
        pointer = await crud_last_news_post.set(db, post_id=post_id, publish_date=publish_date)
        if not await self._cache_pointer(redis_client, pointer):
            await self._invalidate_cached_pointer(redis_client)
        logger.info(f"Latest news post is now {post_id} (published {publish_date.isoformat()})")
        return pointer

    # --- Posts ---

    async def get_news(self, db: AsyncIOMotorDatabase, *, is_admin: bool) -> List[NewsPostPublic]:
        latest = await crud_news_post.get_latest(db, is_admin=is_admin)
        if latest is None:
            return []
        return [NewsPostPublic.model_validate(latest)]

    async def create_post(
        self, db: AsyncIOMotorDatabase, *, post_in: NewsPostCreate,
        redis_client: Optional[aioredis.Redis] = None
    ) -> NewsPostPublic:
        news_post = await crud_news_post.create(db, obj_in=NewsPostInDB(**post_in.model_dump()))
        logger.info(f"News post created: {news_post.id} (published={news_post.published})")

        if news_post.published:
            await self.update_last_news_post_id(
                db, post_id=news_post.id, publish_date=news_post.publishDate, redis_client=redis_client
            )
        return NewsPostPublic.model_validate(news_post)

    async def update_post(
        self, db: AsyncIOMotorDatabase, *, post_id: Optional[str], post_update: NewsPostUpdate,
        redis_client: Optional[aioredis.Redis] = None
    ) -> NewsPostPublic:
        object_id = self._resolve_post_id(post_id)
        if await crud_news_post.get(db, id=object_id) is None:
            raise NotFound("News post not found.")

        news_post = await crud_news_post.update(db, db_obj_id=object_id, obj_in=post_update.to_update_dict())
        if news_post is None:
            # Removed between the lookup and the write
            raise NotFound("News post not found.")
        logger.info(f"News post updated: {news_post.id} (published={news_post.published})")

        if news_post.published:
            await self.update_last_news_post_id(
                db, post_id=news_post.id, publish_date=news_post.publishDate, redis_client=redis_client
            )
        return NewsPostPublic.model_validate(news_post)

    async def delete_post(self, db: AsyncIOMotorDatabase, *, post_id: Optional[str]) -> None:
        # The latest pointer is left as is, even when it references this post.
        object_id = self._resolve_post_id(post_id)
        removed = await crud_news_post.remove(db, id=object_id)
        if removed is None:
            raise NotFound("News post not found.")
        logger.info(f"News post deleted: {object_id}")

    # --- Per-user acknowledgement ---

    async def mark_news_read(
        self, db: AsyncIOMotorDatabase, *, user: UserInDB,
        redis_client: Optional[aioredis.Redis] = None
    ) -> UserInDB:
        user.flags.lastNewStuffRead = await self.last_news_post_id(db, redis_client)
        saved_user = await crud_user.save_news_state(db, user=user)
        if saved_user is None:
            raise NotFound("User not found.")
        logger.info(f"User {user.username} marked news {user.flags.lastNewStuffRead} as read")
        return saved_user

    async def tell_me_later(
        self, db: AsyncIOMotorDatabase, *, user: UserInDB,
        redis_client: Optional[aioredis.Redis] = None
    ) -> UserInDB:
        user.flags.lastNewStuffRead = await self.last_news_post_id(db, redis_client)
        # Seen by default so it does not bump the unread count
        user.replace_notification(
            NEW_STUFF_NOTIFICATION, {"title": settings.NEWS_LAST_ANNOUNCEMENT_TITLE}, seen=True
        )
        saved_user = await crud_user.save_news_state(db, user=user)
        if saved_user is None:
            raise NotFound("User not found.")
        logger.info(f"User {user.username} postponed news {user.flags.lastNewStuffRead}")
        return saved_user

news_service = NewsService()
