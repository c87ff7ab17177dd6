# ===========================================================================
# File: app/models/__init__.py
# ===========================================================================
from .base import PyObjectId, parse_object_id
from .user import UserInDB, UserContributor, UserFlags, UserNotification, NEW_STUFF_NOTIFICATION
from .news import NewsPostInDB, LastNewsPostPointer, LAST_NEWS_POST_SETTING_ID
