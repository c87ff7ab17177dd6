# ===========================================================================
# File: app/crud/crud_news.py
# ===========================================================================
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Optional
from datetime import datetime, timezone
from bson import ObjectId

from app.crud.base import CRUDBase, convert_value_to_bson
from app.models.news import NewsPostInDB, LastNewsPostPointer, LAST_NEWS_POST_SETTING_ID
from pydantic import BaseModel as PydanticBaseModel
from app.db.session import NEWS_POSTS_COLLECTION, APP_SETTINGS_COLLECTION
from app.core.config import logger

class CRUDNewsPost(CRUDBase[NewsPostInDB, PydanticBaseModel, PydanticBaseModel]):
    async def get_latest(self, db: AsyncIOMotorDatabase, *, is_admin: bool) -> Optional[NewsPostInDB]:
        """
        Admin melihat post terbaru apa pun statusnya (draft / terjadwal),
        selain admin hanya post yang sudah published dan publishDate <= sekarang.
        """
        query = {}
        if not is_admin:
            now = convert_value_to_bson(datetime.now(timezone.utc))
            query = {"published": True, "publishDate": {"$lte": now}}
        logger.debug(f"CRUDNewsPost: Fetching latest post (is_admin={is_admin}) with query: {query}")
        posts = await self.get_multi(db, query=query, sort=[("publishDate", -1)], limit=1)
        return posts[0] if posts else None


class CRUDLastNewsPost:
    """Access to the singleton latest-pointer document in `app_settings`."""

    def __init__(self, collection_name: str):
        self.collection_name = collection_name

    async def get(self, db: AsyncIOMotorDatabase) -> LastNewsPostPointer:
        doc = await db[self.collection_name].find_one({"_id": LAST_NEWS_POST_SETTING_ID})
        if not doc:
            return LastNewsPostPointer()
        return LastNewsPostPointer.model_validate(doc)

    async def set(self, db: AsyncIOMotorDatabase, *, post_id: ObjectId, publish_date: datetime) -> LastNewsPostPointer:
        pointer = LastNewsPostPointer(postId=post_id, publishDate=publish_date)
        payload = {
            "postId": ObjectId(post_id),
            "publishDate": convert_value_to_bson(publish_date),
            "updatedAt": convert_value_to_bson(pointer.updatedAt),
        }
        await db[self.collection_name].update_one(
            {"_id": LAST_NEWS_POST_SETTING_ID}, {"$set": payload}, upsert=True
        )
        logger.debug(f"CRUDLastNewsPost: Pointer set to post {post_id} ({publish_date})")
        return pointer


crud_news_post = CRUDNewsPost(NewsPostInDB, NEWS_POSTS_COLLECTION)
crud_last_news_post = CRUDLastNewsPost(APP_SETTINGS_COLLECTION)
