# schemas/article_schemas.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.article_model import ArticleModel


class ArticleCreateRequest(BaseModel):
    """
    Incoming payload for creating an article.

    Both fields are optional here so that a missing field reaches the service
    and is reported with the regular 400 envelope.
    """

    title: Optional[str] = Field(None, description="Article title")
    content: Optional[str] = Field(None, description="Article body")


class ArticleResponse(BaseModel):
    """Article as exposed by the API"""

    id: str = Field(..., description="Article identifier")
    title: str = Field(..., description="Article title")
    content: str = Field(..., description="Article body")
    date: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_model(cls, article: ArticleModel) -> "ArticleResponse":
        """Convert ArticleModel to ArticleResponse"""
        return cls(
            id=article.id,
            title=article.title,
            content=article.content,
            date=article.date,
        )


class ArticleListResponse(BaseModel):
    """Envelope for the article list"""

    success: bool = Field(True, description="Whether the request succeeded")
    count: int = Field(..., description="Number of articles returned")
    data: List[ArticleResponse] = Field(..., description="Articles, newest first")


class ArticleCreateResponse(BaseModel):
    """Envelope for a newly created article"""

    success: bool = Field(True, description="Whether the request succeeded")
    message: str = Field(..., description="Human readable outcome")
    data: ArticleResponse = Field(..., description="The stored article")
