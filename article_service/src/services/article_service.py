# services/article_service.py

from typing import Any, List

from pydantic import ValidationError

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..interfaces.article_repository_interface import ArticleRepositoryInterface
from ..interfaces.errors import ArticleValidationError
from ..models.article_model import TITLE_MAX_LENGTH, ArticleModel

REQUIRED_FIELDS_MESSAGE = "Title and content are required"


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


class ArticleService:
    """
    Article service sitting between the API routers and the repository.
    Validates input before anything is written and keeps the repository
    swappable.
    """

    def __init__(self, repository: ArticleRepositoryInterface):
        """
        Initialize article service

        Args:
            repository: Article repository implementation
        """
        self.repository = repository
        self.logger = LoggerFactory.get_logger(
            name="article-service",
            logger_type=LoggerType.STANDARD,
            level=LogLevel.INFO,
            file_level=LogLevel.DEBUG,
            log_file="logs/article_service.log",
        )
        self.logger.info("ArticleService initialized")

    async def list_articles(self) -> List[ArticleModel]:
        """
        Get all articles, newest first

        Returns:
            List[ArticleModel]: Stored articles ordered by date descending

        Raises:
            ArticleRepositoryError: If the repository cannot be read
        """
        articles = await self.repository.list_articles()
        self.logger.debug(f"Listed {len(articles)} articles")
        return articles

    async def create_article(self, title: Any, content: Any) -> ArticleModel:
        """
        Validate and store a new article

        Args:
            title: Raw title from the request
            content: Raw content from the request

        Returns:
            ArticleModel: Stored article with id and date assigned

        Raises:
            ArticleValidationError: If a field is missing, blank or too long
            ArticleRepositoryError: If the article could not be stored
        """
        if _is_blank(title) or _is_blank(content):
            raise ArticleValidationError(REQUIRED_FIELDS_MESSAGE)

        try:
            article = ArticleModel(title=title, content=content)
        except ValidationError as e:
            fields = [str(err["loc"][0]) for err in e.errors() if err["loc"]]
            if "title" in fields:
                message = f"Title must be at most {TITLE_MAX_LENGTH} characters"
            else:
                message = REQUIRED_FIELDS_MESSAGE
            raise ArticleValidationError(message, {"fields": fields}) from e

        saved = await self.repository.save_article(article)
        self.logger.info(f"Created article {saved.id}: {saved.title[:50]}")
        return saved

    async def count_articles(self) -> int:
        """Number of stored articles"""
        return await self.repository.count_articles()
