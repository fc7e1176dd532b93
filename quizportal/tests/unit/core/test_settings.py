"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from quizportal.core.config.settings import Settings, get_settings


def test_plain_sqlite_url_gets_async_driver():
    settings = Settings(DATABASE_URL="sqlite:///./users.db")
    assert settings.ASYNC_DATABASE_URL == "sqlite+aiosqlite:///./users.db"


def test_explicit_async_url_is_kept():
    settings = Settings(
        DATABASE_URL="postgresql://db/users",
        ASYNC_DATABASE_URL="postgresql+asyncpg://db/users",
    )
    assert settings.ASYNC_DATABASE_URL == "postgresql+asyncpg://db/users"


def test_log_level_is_normalised_and_validated():
    assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="chatty")


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("DEFAULT_PASSWORD_LENGTH", "16")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.TESTING is True
        assert settings.DEFAULT_PASSWORD_LENGTH == 16
    finally:
        get_settings.cache_clear()
