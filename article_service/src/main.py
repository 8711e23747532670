# main.py

"""
FastAPI application for the article service.
Entry point for the Cybersecurity Article Service REST API.
"""

import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.logger import LoggerFactory, LoggerType, LogLevel

from .core.config import settings
from .routers import article_router
from .schemas.common_schemas import HealthCheckSchema, RootSchema
from .utils.dependencies import (
    cleanup_services,
    get_article_service,
    initialize_services,
)

# Setup application logger
logger = LoggerFactory.get_logger(
    name="article-service-main",
    logger_type=LoggerType.STANDARD,
    level=LogLevel(settings.log_level),
    console_level=LogLevel(settings.log_level),
    use_colors=True,
    log_file=f"{settings.log_file_path}article_service_main.log",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    A failed MongoDB connection is logged and the API still starts; requests
    that need the database then fail with a 500 envelope.
    """
    logger.info(f"🚀 Starting {settings.app_name} v1.0.0")
    logger.info(f"📊 Environment: {settings.environment}")
    logger.info(f"🌐 FastAPI Host: {settings.host}:{settings.port}")

    try:
        await initialize_services()
        article_count = await get_article_service().count_articles()
        logger.info(f"📚 {article_count} articles in store")
        logger.info("🎉 Article service is fully operational!")
    except Exception as e:
        logger.error(f"❌ MongoDB connection error: {str(e)}")
        logger.warning("🔧 Starting service in degraded mode")

    yield

    logger.info("🛑 Shutting down services...")
    await cleanup_services()
    logger.info(f"👋 {settings.app_name} shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Cybersecurity Article Service",
    description="Publish and browse short cybersecurity articles, stored in MongoDB",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(article_router.router)


@app.get("/", response_model=RootSchema)
async def root():
    """Root endpoint with service information."""
    return RootSchema(
        message="Welcome to Cybersecurity Web Hub API",
        endpoints={
            "health": "/api/health",
            "articles": "/api/articles",
        },
    )


@app.get("/api/health", response_model=HealthCheckSchema)
async def health_check():
    """Liveness check; does not touch the database."""
    return HealthCheckSchema(
        status="OK",
        message="Cybersecurity API is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


# Exception handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors in the `{success, message}` envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON or wrongly typed fields are client errors."""
    logger.warning(f"Invalid request on {request.method} {request.url}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Invalid request body"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler with proper logging."""
    logger.error(f"Unhandled exception on {request.method} {request.url}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"},
    )


def main():
    """Main function for running the FastAPI server."""
    try:
        logger.info(f"🚀 Starting FastAPI server on {settings.host}:{settings.port}")
        logger.info(f"📚 API available at http://localhost:{settings.port}/api")

        uvicorn.run(
            "article_service.src.main:app",
            host=settings.host,
            port=settings.port,
            reload=settings.debug,
            log_level=settings.log_level.lower(),
        )

    except KeyboardInterrupt:
        logger.info("🛑 Server stopped by user")
    except Exception as e:
        logger.error(f"❌ Failed to start server: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
