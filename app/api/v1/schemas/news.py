# ===========================================================================
# File: app/api/v1/schemas/news.py
# ===========================================================================
from pydantic import AliasChoices, BaseModel, Field
from typing import Optional
from datetime import datetime, timezone
from app.models.base import PyObjectId, UtcDatetime

# Field yang boleh diisi admin, sama untuk create dan update.
EDITABLE_NEWS_FIELDS = ("title", "publishDate", "published", "credits", "text")

class NewsPostCreate(BaseModel):
    # Field lain di body diabaikan (extra='ignore')
    title: str = Field(..., min_length=1)
    publishDate: UtcDatetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    published: bool = False
    credits: str = ""
    text: str

    model_config = {"extra": "ignore"}

class NewsPostUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    publishDate: Optional[UtcDatetime] = None
    published: Optional[bool] = None
    credits: Optional[str] = None
    text: Optional[str] = None

    model_config = {"extra": "ignore"}

    def to_update_dict(self) -> dict:
        """Only fields the client actually sent with a non-null value."""
        return self.model_dump(include=set(EDITABLE_NEWS_FIELDS), exclude_unset=True, exclude_none=True)

class NewsPostPublic(BaseModel):
    id: PyObjectId = Field(validation_alias=AliasChoices("_id", "id"))
    title: str
    publishDate: UtcDatetime
    published: bool
    credits: str
    text: str
    createdAt: UtcDatetime
    updatedAt: UtcDatetime

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
        "from_attributes": True
    }
