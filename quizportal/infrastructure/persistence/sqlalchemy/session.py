"""
SQLAlchemy session management module.

This module provides engine and session factory creation plus the
per-request session context used by the dependency layer.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import lru_cache

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from quizportal.core.config.settings import get_settings
from quizportal.infrastructure.persistence.sqlalchemy.config.base import Base

# Tables must be registered on the metadata before create_all
from quizportal.infrastructure.persistence.sqlalchemy.models import UserModel  # noqa: F401

logger = logging.getLogger(__name__)


def create_session_factory(
    database_url: str, echo: bool = False
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """
    Create an async engine and a session factory bound to it.

    Args:
        database_url: Async SQLAlchemy URL, e.g. ``sqlite+aiosqlite:///./quizportal.db``
        echo: Whether to echo SQL statements

    Returns:
        Tuple of (engine, session factory)
    """
    engine = create_async_engine(database_url, echo=echo, future=True)
    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    logger.info(f"Created session factory for {engine.url.render_as_string(hide_password=True)}")
    return engine, session_factory


@lru_cache
def get_default_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory built once from the application settings."""
    settings = get_settings()
    _, session_factory = create_session_factory(
        settings.ASYNC_DATABASE_URL, echo=settings.DB_ECHO_LOG
    )
    return session_factory


async def init_database(engine: AsyncEngine) -> None:
    """Create all mapped tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialized")


@asynccontextmanager
async def get_db_session(
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncIterator[AsyncSession]:
    """
    Open one session for a logical request scope and close it afterwards.

    A SQLAlchemyError raised inside the block rolls the session back before
    it propagates. When no factory is given, the settings-based default
    factory is used.

    Yields:
        AsyncSession: SQLAlchemy async session for DB operations
    """
    if session_factory is None:
        session_factory = get_default_session_factory()

    async with session_factory() as session:
        try:
            yield session
        except SQLAlchemyError as e:
            logger.error(f"Database session error: {e}", exc_info=True)
            await session.rollback()
            raise
