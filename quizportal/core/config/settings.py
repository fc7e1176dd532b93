"""
Application settings module.

This module provides configuration settings for the user-data layer,
including the database connection, logging and password hashing options.
"""

# Standard Library Imports
import logging
from functools import lru_cache
from typing import Self

# Third-Party Imports
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings using Pydantic for validation and environment variable loading."""

    # Environment
    PROJECT_NAME: str = "QuizPortal"
    ENVIRONMENT: str = "development"  # development, test, production
    TESTING: bool = False

    # Database Settings
    DATABASE_URL: str = "sqlite+aiosqlite:///./quizportal.db"
    ASYNC_DATABASE_URL: str | None = None  # Derived from DATABASE_URL if None
    DB_ECHO_LOG: bool = False  # Whether to echo SQL queries in logs

    # Logging Settings
    LOG_LEVEL: str = "INFO"

    # Password Settings
    PASSWORD_HASHING_SCHEMES: list[str] = Field(default_factory=lambda: ["bcrypt"])
    DEFAULT_PASSWORD_LENGTH: int = Field(default=12, ge=8, le=64)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the valid levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @model_validator(mode="after")
    def ensure_async_database_url(self) -> Self:
        """Ensure ASYNC_DATABASE_URL is set properly from DATABASE_URL."""
        if not self.ASYNC_DATABASE_URL:
            db_url = self.DATABASE_URL
            # Plain SQLite URLs need the async driver
            if db_url.startswith("sqlite:///") and "aiosqlite" not in db_url:
                self.ASYNC_DATABASE_URL = db_url.replace("sqlite:///", "sqlite+aiosqlite:///")
            else:
                self.ASYNC_DATABASE_URL = db_url
            logger.debug(f"Set ASYNC_DATABASE_URL to {self.ASYNC_DATABASE_URL} based on DATABASE_URL")

        if self.ENVIRONMENT == "test":
            self.TESTING = True

        return self


@lru_cache
def get_settings() -> Settings:
    """
    Factory function to get the application settings.

    This function enables dependency injection of settings in FastAPI.
    Tests can call ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        The application settings instance
    """
    return Settings()
