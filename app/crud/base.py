# ===========================================================================
# File: app/crud/base.py
# ===========================================================================
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
from pydantic import BaseModel as PydanticBaseModel
from motor.motor_asyncio import AsyncIOMotorDatabase, AsyncIOMotorCollection
from datetime import datetime, timezone
from bson import ObjectId

from app.core.config import logger

ModelType = TypeVar("ModelType", bound=PydanticBaseModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=PydanticBaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=PydanticBaseModel)

def convert_value_to_bson(value: Any) -> Any:
    if isinstance(value, datetime):
        # Disimpan sebagai UTC naive; model mengembalikannya jadi UTC aware saat dibaca
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, ObjectId):
        return ObjectId(value) # PyObjectId -> bson.ObjectId
    if isinstance(value, PydanticBaseModel):
        return _convert_pydantic_types_to_bson(value.model_dump(by_alias=True))
    if isinstance(value, dict):
        return _convert_pydantic_types_to_bson(value)
    if isinstance(value, list):
        return [convert_value_to_bson(item) for item in value]
    return value

def _convert_pydantic_types_to_bson(data: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(data, dict):
        return data
    return {key: convert_value_to_bson(value) for key, value in data.items()}

class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType], collection_name: str):
        self.model = model
        self.collection_name = collection_name

    async def get_collection(self, db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
        return db[self.collection_name]

    async def get(self, db: AsyncIOMotorDatabase, id: ObjectId) -> Optional[ModelType]:
        collection = await self.get_collection(db)
        logger.debug(f"CRUD: Attempting to find document in '{self.collection_name}' with _id: {id}")
        doc = await collection.find_one({"_id": ObjectId(id)})
        if doc:
            return self.model.model_validate(doc)
        logger.warning(f"CRUD: Document NOT found in '{self.collection_name}' for _id: {id}")
        return None

    async def get_multi(
        self, db: AsyncIOMotorDatabase, *, skip: int = 0, limit: int = 100,
        sort: Optional[List[tuple]] = None, query: Optional[Dict[str, Any]] = None
    ) -> List[ModelType]:
        collection = await self.get_collection(db)
        cursor = collection.find(query or {}, sort=sort, skip=skip, limit=limit)
        documents = await cursor.to_list(length=limit)
        return [self.model.model_validate(doc) for doc in documents]

    async def create(self, db: AsyncIOMotorDatabase, *, obj_in: ModelType) -> ModelType:
        collection = await self.get_collection(db)
        obj_in_dict = obj_in.model_dump(by_alias=True, exclude_none=True)
        bson_compatible_data = _convert_pydantic_types_to_bson(obj_in_dict)
        logger.debug(f"CRUD: Creating document in '{self.collection_name}' with BSON-compatible data: {bson_compatible_data}")

        result = await collection.insert_one(bson_compatible_data)
        created_doc = await collection.find_one({"_id": result.inserted_id})
        if not created_doc:
            logger.error(f"CRUD: Failed to retrieve document after insert for {self.collection_name}, id: {result.inserted_id}")
            raise RuntimeError(f"Database retrieval failed after insert for {self.collection_name}, id: {result.inserted_id}")
        logger.debug(f"CRUD: Document inserted in '{self.collection_name}' with new _id: {result.inserted_id}")
        return self.model.model_validate(created_doc)

    async def update(
        self, db: AsyncIOMotorDatabase, *, db_obj_id: ObjectId, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> Optional[ModelType]:
        collection = await self.get_collection(db)

        if isinstance(obj_in, PydanticBaseModel):
            update_data_dict = obj_in.model_dump(exclude_unset=True, exclude_none=True)
        elif isinstance(obj_in, dict):
            update_data_dict = obj_in
        else:
            raise ValueError("obj_in must be a Pydantic model or a dictionary for update")

        if not update_data_dict:
            return await self.get(db, id=db_obj_id)

        bson_compatible_set = _convert_pydantic_types_to_bson(
            {**update_data_dict, "updatedAt": datetime.now(timezone.utc)}
        )
        update_payload = {"$set": bson_compatible_set}

        logger.debug(f"CRUD: Attempting to update document in '{self.collection_name}' with _id: {db_obj_id}, update_payload: {update_payload}")
        result = await collection.update_one({"_id": ObjectId(db_obj_id)}, update_payload)
        if result.matched_count == 0:
            logger.warning(f"CRUD: No document found with _id: {db_obj_id} in '{self.collection_name}' to update.")
            return None

        logger.debug(f"CRUD: Update result for _id: {db_obj_id} in '{self.collection_name}' - Matched: {result.matched_count}, Modified: {result.modified_count}")
        return await self.get(db, id=db_obj_id)

    async def remove(self, db: AsyncIOMotorDatabase, *, id: ObjectId) -> Optional[ModelType]:
        collection = await self.get_collection(db)
        logger.debug(f"CRUD: Attempting to remove document in '{self.collection_name}' with _id: {id}")
        deleted_obj_doc = await collection.find_one_and_delete({"_id": ObjectId(id)})
        if deleted_obj_doc:
            logger.debug(f"CRUD: Document removed from '{self.collection_name}' with _id: {id}")
            return self.model.model_validate(deleted_obj_doc)
        logger.warning(f"CRUD: No document found with _id: {id} in '{self.collection_name}' to remove.")
        return None
