# ===========================================================================
# File: app/models/base.py
# ===========================================================================
from bson import ObjectId as BsonObjectId
from pydantic import AfterValidator, GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic_core import core_schema
from typing import Annotated, Any, Dict, Optional
from datetime import datetime, timezone

class PyObjectId(BsonObjectId):
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def validate_from_str(value: str) -> BsonObjectId:
            if not BsonObjectId.is_valid(value):
                raise ValueError(f"Invalid ObjectId string: {value}")
            return BsonObjectId(value)

        from_str_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(validate_from_str),
            ]
        )
        is_instance_schema = core_schema.is_instance_schema(BsonObjectId)

        # String atau instance BsonObjectId; di JSON selalu jadi string
        return core_schema.union_schema(
            [is_instance_schema, from_str_schema],
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> Dict[str, Any]:
        json_schema = handler(schema)
        json_schema.update(type="string", example="507f1f77bcf86cd799439011")
        return json_schema

def parse_object_id(value: Optional[str]) -> Optional[BsonObjectId]:
    """Returns the ObjectId for `value`, or None when it is not a valid id."""
    if value is None or not BsonObjectId.is_valid(value):
        return None
    return BsonObjectId(value)

def as_utc(value: datetime) -> datetime:
    # Naive datetime dari MongoDB selalu UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]
