# ===========================================================================
# File: app/api/v1/schemas/user.py
# ===========================================================================
from pydantic import AliasChoices, BaseModel, Field
from typing import List
from app.models.base import PyObjectId, UtcDatetime
from app.models.user import UserContributor as UserContributorModel, UserFlags as UserFlagsModel, UserNotification as UserNotificationModel

class UserPublic(BaseModel):
    id: PyObjectId = Field(validation_alias=AliasChoices("_id", "id"))
    username: str
    contributor: UserContributorModel
    flags: UserFlagsModel
    notifications: List[UserNotificationModel]
    createdAt: UtcDatetime

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
        "from_attributes": True
    }
