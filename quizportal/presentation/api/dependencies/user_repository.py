"""
User repository dependency provider.

This module provides the dependency injection for user repositories
used throughout the application for user-related operations.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from quizportal.core.interfaces.repositories.user_repository_interface import IUserRepository
from quizportal.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    SQLAlchemyUserRepository,
)
from quizportal.presentation.api.dependencies.database import get_db


async def get_user_repository(db_session: AsyncSession = Depends(get_db)) -> IUserRepository:
    """
    Provides a user repository implementation.

    Args:
        db_session: Database session injected by FastAPI

    Returns:
        An implementation of the IUserRepository interface
    """
    return SQLAlchemyUserRepository(db_session)


UserRepositoryDep = Annotated[IUserRepository, Depends(get_user_repository)]
