# ===========================================================================
# File: app/api/v1/schemas/__init__.py
# ===========================================================================
from .token import TokenData
from .user import UserPublic
from .news import NewsPostCreate, NewsPostUpdate, NewsPostPublic, EDITABLE_NEWS_FIELDS
