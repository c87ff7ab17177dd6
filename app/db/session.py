# ===========================================================================
# File: app/db/session.py
# ===========================================================================
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from app.core.config import settings, logger
from typing import Optional

NEWS_POSTS_COLLECTION = "news_posts"
USERS_COLLECTION = "users"
APP_SETTINGS_COLLECTION = "app_settings"

class MongoDbContextManager:
    client: Optional[AsyncIOMotorClient] = None
    db: Optional[AsyncIOMotorDatabase] = None

    async def connect_to_mongo(self):
        logger.info(f"Attempting to connect to MongoDB at {settings.MONGODB_URL}...")
        try:
            self.client = AsyncIOMotorClient(settings.MONGODB_URL, serverSelectionTimeoutMS=5000, tz_aware=True)
            await self.client.admin.command('ping')
            self.db = self.client[settings.MONGODB_DB_NAME]
            await ensure_indexes(self.db)
            logger.info(f"Successfully connected to MongoDB database: {settings.MONGODB_DB_NAME}")
        except Exception as e:
            logger.error(f"Could not connect to MongoDB: {e}", exc_info=True)

    async def close_mongo_connection(self):
        if self.client:
            logger.info("Closing MongoDB connection...")
            self.client.close()
            self.client = None
            self.db = None
            logger.info("MongoDB connection closed.")

mongo_db_manager = MongoDbContextManager()

async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    # GetNews sorts by publishDate, optionally filtered on published
    await db[NEWS_POSTS_COLLECTION].create_index([("publishDate", -1)])
    await db[NEWS_POSTS_COLLECTION].create_index([("published", 1), ("publishDate", -1)])
    await db[USERS_COLLECTION].create_index("username", unique=True)
    logger.debug("MongoDB indexes ensured.")

async def get_db() -> AsyncIOMotorDatabase:
    if mongo_db_manager.db is None:
        logger.critical("MongoDB not initialized. Application might not have started correctly or DB connection failed at startup.")
        raise RuntimeError("MongoDB not connected. Ensure connect_to_mongo is called successfully at application startup.")
    return mongo_db_manager.db
