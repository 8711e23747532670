# config.py

"""
Configuration for the Streamlit frontend.
"""

from datetime import tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FrontendSettings(BaseSettings):
    """Frontend settings read from the environment or ``.env``"""

    articles_api_base: str = Field(
        default="http://localhost:5000/api",
        description="Base URL of the article API",
    )
    articles_api_timeout: float = Field(
        default=30.0, description="Request timeout in seconds"
    )
    content_preview_length: int = Field(
        default=200, description="Characters shown before 'Read More'"
    )
    display_timezone: Optional[str] = Field(
        default=None,
        description="IANA timezone for card dates; server local time when unset",
    )
    log_level: str = "INFO"

    @field_validator("articles_api_base")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    @field_validator("articles_api_timeout")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("articles_api_timeout must be positive")
        return v

    @field_validator("display_timezone")
    @classmethod
    def validate_display_timezone(cls, v):
        if not v:
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown display_timezone: {v}") from e
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
    def display_tzinfo(self) -> Optional[tzinfo]:
        """Timezone for rendering dates, None meaning the server's local time"""
        return ZoneInfo(self.display_timezone) if self.display_timezone else None


settings = FrontendSettings()
