# utils/dependencies.py

"""
Dependency injection utilities for the article service.
"""

from dependency_injector import containers, providers

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..core.config import settings
from ..repositories.mongo_article_repository import MongoArticleRepository
from ..services.article_service import ArticleService


class Container(containers.DeclarativeContainer):
    """Dependency injection container using dependency-injector"""

    # Configuration
    config = providers.Configuration()

    # Logger
    logger = providers.Singleton(
        LoggerFactory.get_logger,
        name="dependency-container",
        logger_type=LoggerType.STANDARD,
        level=LogLevel.INFO,
    )

    # MongoDB Repository
    mongo_repository = providers.Singleton(
        MongoArticleRepository,
        mongo_url=config.mongo_url.as_(str),
        database_name=config.database_name.as_(str),
        collection_name=config.collection_name.as_(str),
        connection_options=config.connection_options,
    )

    # Article Service
    article_service = providers.Singleton(
        ArticleService,
        repository=mongo_repository,
    )


# Global container instance
container = Container()

# Configure default values from settings
container.config.mongo_url.from_value(settings.mongodb_uri)
container.config.database_name.from_value(settings.mongodb_database)
container.config.collection_name.from_value(settings.mongodb_collection_articles)
container.config.connection_options.from_value(
    settings.get_mongodb_connection_options()
)


async def initialize_services() -> None:
    """Connect to MongoDB and prepare the collection"""
    logger = container.logger()
    logger.info("Initializing services...")

    try:
        repository = container.mongo_repository()
        await repository.initialize()
        logger.info("MongoDB repository initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize services: {e}")
        raise


async def cleanup_services() -> None:
    """Close the MongoDB client"""
    logger = container.logger()
    logger.info("Cleaning up services...")

    try:
        repository = container.mongo_repository()
        await repository.close()
        logger.info("MongoDB repository closed")

        logger.info("Services cleaned up successfully")
    except Exception as e:
        logger.error(f"Error during cleanup: {e}")


# Dependency injection functions for FastAPI
def get_article_service() -> ArticleService:
    """
    Get article service (for FastAPI dependency injection)

    Returns:
        ArticleService: Configured article service
    """
    return container.article_service()

