# ===========================================================================
# File: app/models/news.py
# ===========================================================================
from pydantic import BaseModel, Field
from typing import Literal, Optional
from datetime import datetime, timezone
from app.models.base import PyObjectId, UtcDatetime

LAST_NEWS_POST_SETTING_ID = "lastNewsPost"

class NewsPostInDB(BaseModel):
    id: PyObjectId = Field(default_factory=PyObjectId, alias="_id")
    title: str
    publishDate: UtcDatetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    published: bool = False
    credits: str = ""
    text: str

    createdAt: UtcDatetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updatedAt: UtcDatetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
        "from_attributes": True
    }

class LastNewsPostPointer(BaseModel):
    """Singleton document tracking the most recently published post."""
    id: Literal["lastNewsPost"] = Field(default=LAST_NEWS_POST_SETTING_ID, alias="_id")
    postId: Optional[PyObjectId] = None
    publishDate: Optional[UtcDatetime] = None
    updatedAt: UtcDatetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True
    }
