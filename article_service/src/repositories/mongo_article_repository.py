# repositories/mongo_article_repository.py

"""
MongoDB implementation of the article repository using Motor.
"""

from typing import Any, Dict, List, Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pydantic import ValidationError
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..interfaces.article_repository_interface import ArticleRepositoryInterface
from ..interfaces.errors import ArticleRepositoryError
from ..models.article_model import ArticleModel


class MongoArticleRepository(ArticleRepositoryInterface):
    """MongoDB implementation of ArticleRepositoryInterface"""

    def __init__(
        self,
        mongo_url: str,
        database_name: str = "cybersec_hub",
        collection_name: str = "articles",
        connection_options: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize MongoDB article repository

        Args:
            mongo_url: MongoDB connection URL
            database_name: Database name
            collection_name: Collection holding article documents
            connection_options: Extra keyword options for the Motor client
        """
        self.mongo_url = mongo_url
        self.database_name = database_name
        self.client: AsyncIOMotorClient = AsyncIOMotorClient(
            mongo_url, tz_aware=True, **(connection_options or {})
        )
        self.db: AsyncIOMotorDatabase = self.client[database_name]
        self.collection: AsyncIOMotorCollection = self.db[collection_name]

        self.logger = LoggerFactory.get_logger(
            name="mongo-article-repository",
            logger_type=LoggerType.STANDARD,
            level=LogLevel.INFO,
            file_level=LogLevel.DEBUG,
            log_file="logs/mongo_article_repository.log",
        )

        self.logger.info(
            f"MongoDB article repository initialized with database: {database_name}"
        )

    async def initialize(self) -> None:
        """Verify connectivity and create the sort index"""
        try:
            await self.client.admin.command("ping")
            await self.collection.create_index(
                [("date", DESCENDING)], name="date_desc_idx"
            )
            self.logger.info("✅ Connected to MongoDB, indexes ensured")
        except PyMongoError as e:
            self.logger.error(f"❌ MongoDB initialization failed: {e}")
            raise ArticleRepositoryError(
                "Failed to initialize article repository", {"error": str(e)}
            ) from e

    async def save_article(self, article: ArticleModel) -> ArticleModel:
        document = article.to_document()
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            self.logger.error(f"Failed to save article: {e}")
            raise ArticleRepositoryError(
                "Failed to save article", {"error": str(e)}
            ) from e

        saved = article.model_copy(update={"id": str(result.inserted_id)})
        self.logger.debug(f"Saved article {saved.id}: {saved.title[:50]}")
        return saved

    async def list_articles(self) -> List[ArticleModel]:
        try:
            cursor = self.collection.find().sort("date", DESCENDING)
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            self.logger.error(f"Failed to list articles: {e}")
            raise ArticleRepositoryError(
                "Failed to list articles", {"error": str(e)}
            ) from e

        try:
            articles = [ArticleModel.from_document(doc) for doc in documents]
        except ValidationError as e:
            self.logger.error(f"Invalid article document in collection: {e}")
            raise ArticleRepositoryError(
                "Invalid article document", {"error": str(e)}
            ) from e
        self.logger.debug(f"Retrieved {len(articles)} articles")
        return articles

    async def count_articles(self) -> int:
        try:
            return await self.collection.count_documents({})
        except PyMongoError as e:
            self.logger.error(f"Failed to count articles: {e}")
            raise ArticleRepositoryError(
                "Failed to count articles", {"error": str(e)}
            ) from e

    async def close(self) -> None:
        """Close the MongoDB connection."""
        self.client.close()
        self.logger.info("Database connection closed")
