# ===========================================================================
# File: app/models/user.py
# ===========================================================================
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
import uuid
from app.models.base import PyObjectId, UtcDatetime

NEW_STUFF_NOTIFICATION = "NEW_STUFF"

class UserContributor(BaseModel):
    admin: bool = False

class UserFlags(BaseModel):
    lastNewStuffRead: Optional[str] = None

class UserNotification(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    type: str
    data: Dict[str, Any] = Field(default_factory=dict)
    seen: bool = False
    createdAt: UtcDatetime = Field(default_factory=lambda: datetime.now(timezone.utc))

class UserInDB(BaseModel):
    id: PyObjectId = Field(default_factory=PyObjectId, alias="_id")
    username: str = Field(..., min_length=3, max_length=50)

    contributor: UserContributor = Field(default_factory=UserContributor)
    flags: UserFlags = Field(default_factory=UserFlags)
    notifications: List[UserNotification] = Field(default_factory=list)

    is_active: bool = True

    createdAt: UtcDatetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updatedAt: UtcDatetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
        "validate_assignment": True,
        "from_attributes": True
    }

    @property
    def is_contributor_admin(self) -> bool:
        return bool(self.contributor and self.contributor.admin)

    def add_notification(self, type: str, data: Optional[Dict[str, Any]] = None, seen: bool = False) -> UserNotification:
        notification = UserNotification(type=type, data=data or {}, seen=seen)
        self.notifications = [*self.notifications, notification]
        return notification

    def remove_notification(self, type: str) -> Optional[UserNotification]:
        """Removes the first notification of the given type, if any."""
        for index, notification in enumerate(self.notifications):
            if notification.type == type:
                remaining = list(self.notifications)
                removed = remaining.pop(index)
                self.notifications = remaining
                return removed
        return None

    def replace_notification(self, type: str, data: Optional[Dict[str, Any]] = None, seen: bool = False) -> UserNotification:
        self.remove_notification(type)
        return self.add_notification(type, data, seen)
