# ===========================================================================
# File: app/crud/crud_user.py
# ===========================================================================
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Optional
from pydantic import BaseModel as PydanticBaseModel

from app.crud.base import CRUDBase
from app.models.user import UserInDB, UserContributor
from app.db.session import USERS_COLLECTION
from app.core.config import logger

class CRUDUser(CRUDBase[UserInDB, PydanticBaseModel, PydanticBaseModel]):
    async def get_by_username(self, db: AsyncIOMotorDatabase, *, username: str) -> Optional[UserInDB]:
        collection = await self.get_collection(db)
        logger.debug(f"CRUDUser: Getting user by username: {username}")
        doc = await collection.find_one({"username": username})
        return UserInDB.model_validate(doc) if doc else None

    async def create_user(
        self, db: AsyncIOMotorDatabase, *, username: str, is_admin: bool = False
    ) -> UserInDB:
        logger.info(f"CRUDUser: Creating new user '{username}' (admin={is_admin})")
        user_to_create = UserInDB(username=username, contributor=UserContributor(admin=is_admin))
        return await super().create(db, obj_in=user_to_create)

    async def save_news_state(self, db: AsyncIOMotorDatabase, *, user: UserInDB) -> Optional[UserInDB]:
        """Persists the read marker and the notification list in a single write."""
        logger.debug(f"CRUDUser: Saving flags and {len(user.notifications)} notifications for user_id: {user.id}")
        updated_user = await super().update(
            db,
            db_obj_id=user.id,
            obj_in={"flags": user.flags, "notifications": user.notifications},
        )
        if not updated_user:
            logger.error(f"CRUDUser: Failed to save news state for user ID: {user.id}, user not found.")
        return updated_user


crud_user = CRUDUser(UserInDB, USERS_COLLECTION)
