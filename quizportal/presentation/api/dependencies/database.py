"""
Database dependencies for API routes.

Provides one AsyncSession per request. The session factory is taken from
``app.state.actual_session_factory`` when the application has set one,
otherwise the settings-based default factory is used.
"""

import logging
from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quizportal.infrastructure.persistence.sqlalchemy.session import (
    get_db_session,
    get_default_session_factory,
)

logger = logging.getLogger(__name__)


def get_session_factory_from_request_state(request: Request) -> async_sessionmaker[AsyncSession]:
    factory = getattr(request.app.state, "actual_session_factory", None)
    if factory is None:
        logger.debug("No session factory on app.state, using the default factory")
        return get_default_session_factory()
    return factory


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that yields a SQLAlchemy async session.

    Exceptions raised by the route are thrown back into the session context,
    which rolls back on database errors and always closes the session.

    Yields:
        AsyncSession: SQLAlchemy async session for DB operations
    """
    async with get_db_session(get_session_factory_from_request_state(request)) as session:
        yield session
