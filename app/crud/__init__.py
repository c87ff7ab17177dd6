# ===========================================================================
# File: app/crud/__init__.py
# ===========================================================================
from .base import CRUDBase
from .crud_user import crud_user
from .crud_news import crud_news_post, crud_last_news_post
