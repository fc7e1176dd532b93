"""
Shared pytest fixtures.

Database fixtures run against an in-memory SQLite database through aiosqlite.
A StaticPool keeps every session on the same connection so the schema created
by the engine fixture is visible to all of them.
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from quizportal.core.domain.entities.user import User, UserRole
from quizportal.infrastructure.persistence.sqlalchemy.config.base import Base
from quizportal.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    SQLAlchemyUserRepository,
)
from quizportal.infrastructure.security.password.password_handler import PasswordHandler

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Fast scheme for tests; production defaults to bcrypt
TEST_HASHING_SCHEMES = ["pbkdf2_sha256"]


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def user_repository(db_session: AsyncSession) -> SQLAlchemyUserRepository:
    return SQLAlchemyUserRepository(db_session)


@pytest.fixture
def password_handler() -> PasswordHandler:
    return PasswordHandler(schemes=TEST_HASHING_SCHEMES)


@pytest.fixture
def make_user() -> Callable[..., User]:
    """Factory for unsaved User entities with sensible defaults."""

    def _make_user(**overrides: Any) -> User:
        data: dict[str, Any] = {
            "full_name": "Jane Doe",
            "email": "jane@example.com",
            "password": "hashed-password",
            "role": UserRole.STUDENT,
        }
        data.update(overrides)
        return User(**data)

    return _make_user
