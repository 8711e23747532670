# models/__init__.py

"""
Data models for persistence and domain logic.
"""

from .article_model import TITLE_MAX_LENGTH, ArticleModel

__all__ = ["ArticleModel", "TITLE_MAX_LENGTH"]
