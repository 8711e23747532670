# interfaces/article_repository_interface.py

from abc import ABC, abstractmethod
from typing import List

from ..models.article_model import ArticleModel


class ArticleRepositoryInterface(ABC):
    """Abstract interface for article repository operations"""

    @abstractmethod
    async def save_article(self, article: ArticleModel) -> ArticleModel:
        """
        Persist a new article

        Args:
            article: Validated article without an id

        Returns:
            ArticleModel: The stored article with its assigned id

        Raises:
            ArticleRepositoryError: If the store rejects the write
        """
        pass

    @abstractmethod
    async def list_articles(self) -> List[ArticleModel]:
        """
        Get every stored article, newest first

        Returns:
            List[ArticleModel]: Articles ordered by date descending

        Raises:
            ArticleRepositoryError: If the store cannot be read
        """
        pass

    @abstractmethod
    async def count_articles(self) -> int:
        """
        Count stored articles

        Returns:
            int: Number of documents in the collection
        """
        pass
