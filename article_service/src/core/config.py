# core/config.py

"""
Configuration management for the article service.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # Service configuration
    app_name: str = "cybersec-article-service"
    debug: bool = False
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 5000

    # MongoDB configuration
    mongodb_uri: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string",
    )
    mongodb_database: str = "cybersec_hub"
    mongodb_collection_articles: str = "articles"

    # Connection Options
    mongodb_connection_timeout: int = Field(
        default=10000, description="Connection timeout in milliseconds"
    )
    mongodb_server_selection_timeout: int = Field(
        default=5000, description="Server selection timeout in milliseconds"
    )
    mongodb_max_pool_size: int = Field(
        default=10, description="Maximum connection pool size"
    )
    mongodb_min_pool_size: int = Field(
        default=1, description="Minimum connection pool size"
    )

    # CORS
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    # Logging configuration
    log_level: str = "INFO"
    log_file_path: str = "logs/"

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        if v < 1 or v > 65535:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("mongodb_uri")
    @classmethod
    def validate_mongodb_uri(cls, v):
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(
                "mongodb_uri must start with 'mongodb://' or 'mongodb+srv://'"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in levels:
            raise ValueError(f"log_level must be one of {sorted(levels)}")
        return v.upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def database_info(self) -> dict:
        """Get current database configuration info"""
        return {
            "database": self.mongodb_database,
            "collection": self.mongodb_collection_articles,
            "connection_timeout": self.mongodb_connection_timeout,
            "server_selection_timeout": self.mongodb_server_selection_timeout,
            "max_pool_size": self.mongodb_max_pool_size,
            "min_pool_size": self.mongodb_min_pool_size,
        }

    def get_mongodb_connection_options(self) -> dict:
        """Get MongoDB connection options"""
        return {
            "connectTimeoutMS": self.mongodb_connection_timeout,
            "serverSelectionTimeoutMS": self.mongodb_server_selection_timeout,
            "maxPoolSize": self.mongodb_max_pool_size,
            "minPoolSize": self.mongodb_min_pool_size,
        }


# Global settings instance
settings = Settings()
