# routers/article_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..interfaces.errors import ArticleRepositoryError, ArticleValidationError
from ..schemas.article_schemas import (
    ArticleCreateRequest,
    ArticleCreateResponse,
    ArticleListResponse,
    ArticleResponse,
)
from ..schemas.common_schemas import ErrorResponseSchema
from ..services.article_service import ArticleService
from ..utils.dependencies import get_article_service

# Initialize router
router = APIRouter(prefix="/api/articles", tags=["articles"])

# Setup logging
logger = LoggerFactory.get_logger(
    name="article-router",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
    file_level=LogLevel.DEBUG,
    log_file="logs/article_router.log",
)


@router.get(
    "",
    response_model=ArticleListResponse,
    responses={500: {"model": ErrorResponseSchema}},
)
async def list_articles(
    article_service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    """
    Get all articles, newest first

    Returns every stored article ordered by creation date (descending),
    wrapped in a `{success, count, data}` envelope.
    """
    try:
        articles = await article_service.list_articles()
    except ArticleRepositoryError as e:
        logger.error(f"Error fetching articles: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while fetching articles",
        )

    data = [ArticleResponse.from_model(article) for article in articles]
    logger.info(f"Articles retrieved: {len(data)} items")
    return ArticleListResponse(success=True, count=len(data), data=data)


@router.post(
    "",
    response_model=ArticleCreateResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponseSchema},
        500: {"model": ErrorResponseSchema},
    },
)
async def create_article(
    payload: ArticleCreateRequest,
    article_service: ArticleService = Depends(get_article_service),
) -> ArticleCreateResponse:
    """
    Create a new article

    - **title**: required, trimmed, at most 200 characters
    - **content**: required, trimmed
    """
    try:
        article = await article_service.create_article(
            title=payload.title, content=payload.content
        )
    except ArticleValidationError as e:
        logger.warning(f"Rejected article: {e.message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except ArticleRepositoryError as e:
        logger.error(f"Error creating article: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while creating article",
        )

    return ArticleCreateResponse(
        success=True,
        message="Article created successfully",
        data=ArticleResponse.from_model(article),
    )
