# interfaces/__init__.py

"""
Abstract interfaces and error types for the article service.
"""

from .article_repository_interface import ArticleRepositoryInterface
from .errors import ArticleRepositoryError, ArticleValidationError

__all__ = [
    "ArticleRepositoryInterface",
    "ArticleRepositoryError",
    "ArticleValidationError",
]
