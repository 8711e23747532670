# services/__init__.py

"""
Business logic services.
"""

from .article_service import ArticleService

__all__ = ["ArticleService"]
