"""
Utility functions and dependency injection.
"""

from .dependencies import get_article_service

__all__ = [
    "get_article_service",
]
