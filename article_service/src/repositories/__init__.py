# repositories/__init__.py

from .mongo_article_repository import MongoArticleRepository

__all__ = ["MongoArticleRepository"]
