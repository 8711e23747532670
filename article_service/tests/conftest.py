# conftest.py

import itertools
from typing import List

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from article_service.src.interfaces.article_repository_interface import (
    ArticleRepositoryInterface,
)
from article_service.src.interfaces.errors import ArticleRepositoryError
from article_service.src.main import app
from article_service.src.models.article_model import ArticleModel
from article_service.src.services.article_service import ArticleService
from article_service.src.utils.dependencies import get_article_service


class InMemoryArticleRepository(ArticleRepositoryInterface):
    """Repository keeping documents in a list, ordered like the Mongo one"""

    def __init__(self):
        self.documents: List[ArticleModel] = []
        self._sequence = itertools.count()
        self._inserted_at = {}

    async def save_article(self, article: ArticleModel) -> ArticleModel:
        saved = article.model_copy(update={"id": str(ObjectId())})
        self._inserted_at[saved.id] = next(self._sequence)
        self.documents.append(saved)
        return saved

    async def list_articles(self) -> List[ArticleModel]:
        # Same-millisecond inserts fall back to insertion order
        return sorted(
            self.documents,
            key=lambda a: (a.date, self._inserted_at[a.id]),
            reverse=True,
        )

    async def count_articles(self) -> int:
        return len(self.documents)


class FailingArticleRepository(ArticleRepositoryInterface):
    """Repository whose store is unreachable"""

    async def save_article(self, article: ArticleModel) -> ArticleModel:
        raise ArticleRepositoryError("Failed to save article")

    async def list_articles(self) -> List[ArticleModel]:
        raise ArticleRepositoryError("Failed to list articles")

    async def count_articles(self) -> int:
        raise ArticleRepositoryError("Failed to count articles")


@pytest.fixture
def repository():
    return InMemoryArticleRepository()


@pytest.fixture
def article_service(repository):
    return ArticleService(repository=repository)


@pytest.fixture
def client(article_service):
    app.dependency_overrides[get_article_service] = lambda: article_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client():
    service = ArticleService(repository=FailingArticleRepository())
    app.dependency_overrides[get_article_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
