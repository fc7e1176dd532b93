"""
Application Factory.

Builds the FastAPI application that hosts the user-data layer: configures
logging, creates the database engine and session factory on startup and
exposes the factory on ``app.state`` for the dependency providers.
Routers are mounted by the caller.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from quizportal import __version__
from quizportal.core.config.settings import Settings, get_settings
from quizportal.core.logging_config import build_logging_config, setup_logging
from quizportal.infrastructure.persistence.sqlalchemy.session import (
    create_session_factory,
    init_database,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the engine and session factory for the application's lifetime."""
    settings: Settings = fastapi_app.state.settings

    engine, session_factory = create_session_factory(
        settings.ASYNC_DATABASE_URL, echo=settings.DB_ECHO_LOG
    )
    await init_database(engine)
    fastapi_app.state.actual_session_factory = session_factory
    logger.info("Database engine and session factory initialized")

    try:
        yield
    finally:
        fastapi_app.state.actual_session_factory = None
        await engine.dispose()
        logger.info("Database engine disposed")


def create_application(settings: Settings | None = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Settings to use instead of the environment-derived ones

    Returns:
        The configured FastAPI application
    """
    settings = settings or get_settings()
    setup_logging(build_logging_config(level=settings.LOG_LEVEL))

    app = FastAPI(title=settings.PROJECT_NAME, version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.actual_session_factory = None
    return app
