# schemas/__init__.py

from .article_schemas import (
    ArticleCreateRequest,
    ArticleCreateResponse,
    ArticleListResponse,
    ArticleResponse,
)
from .common_schemas import ErrorResponseSchema, HealthCheckSchema, RootSchema

__all__ = [
    # Article schemas
    "ArticleCreateRequest",
    "ArticleCreateResponse",
    "ArticleListResponse",
    "ArticleResponse",
    # Common schemas
    "ErrorResponseSchema",
    "HealthCheckSchema",
    "RootSchema",
]
