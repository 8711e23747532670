# models/article_model.py

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

TITLE_MAX_LENGTH = 200


def utc_now() -> datetime:
    """Current UTC time truncated to the millisecond precision MongoDB stores"""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


class ArticleModel(BaseModel):
    """MongoDB model for articles"""

    id: Optional[str] = Field(default=None, alias="_id")
    title: str = Field(
        ...,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Article title",
    )
    content: str = Field(..., min_length=1, description="Article body")
    date: datetime = Field(
        default_factory=utc_now, description="Creation timestamp, sort key"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    @field_validator("id", mode="before")
    @classmethod
    def validate_object_id(cls, v):
        """Convert ObjectId to string"""
        if isinstance(v, ObjectId):
            return str(v)
        return v

    @field_validator("date")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        # Documents written by other clients may come back naive
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    def to_document(self) -> Dict[str, Any]:
        """Build the MongoDB document; the store assigns ``_id``"""
        return self.model_dump(exclude={"id"})

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "ArticleModel":
        """Build an ArticleModel from a raw MongoDB document"""
        return cls.model_validate(document)
