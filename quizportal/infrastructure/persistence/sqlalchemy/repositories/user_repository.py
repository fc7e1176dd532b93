"""
User repository implementation using SQLAlchemy.

This module implements the IUserRepository interface for persisting and retrieving
User entities using the SQLAlchemy async ORM.

Every operation is a single round trip on the session handed to the constructor.
Mutations commit immediately. Storage errors are logged and re-raised as-is.
"""

import logging

from sqlalchemy import exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quizportal.core.domain.entities.user import User, UserRole
from quizportal.core.interfaces.repositories.user_repository_interface import IUserRepository
from quizportal.domain.exceptions.repository import EntityNotFoundException
from quizportal.domain.utils.datetime_utils import ensure_utc
from quizportal.infrastructure.persistence.sqlalchemy.mappers.user_mapper import UserMapper
from quizportal.infrastructure.persistence.sqlalchemy.models.user import UserModel

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(IUserRepository):
    """
    SQLAlchemy implementation of the IUserRepository interface.

    This class bridges between the domain User entity and the SQLAlchemy User model.
    The session is owned by the caller (one per request scope) and is used
    sequentially; the repository never opens or closes it.
    """

    def __init__(self, db_session: AsyncSession):
        """
        Initialize the repository with a SQLAlchemy async session.

        Args:
            db_session: The session all operations run on.

        Raises:
            ValueError: If no session is provided.
        """
        if db_session is None:
            raise ValueError("db_session must be provided")
        self._session = db_session

    async def _commit(self, action: str) -> None:
        """Commit pending changes, rolling back before re-raising on failure."""
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Database error when {action}: {e}")
            await self._session.rollback()
            raise

    async def _get_model(self, user_id: int) -> UserModel | None:
        try:
            return await self._session.get(UserModel, user_id)
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving user by id {user_id}: {e}")
            raise

    async def get_user_details_by_id(self, user_id: int) -> User | None:
        """
        Retrieve a user by their ID.

        Args:
            user_id: The ID of the user to retrieve

        Returns:
            The User domain entity, or None if not found
        """
        user_model = await self._get_model(user_id)
        if user_model is None:
            logger.debug(f"User with id {user_id} not found")
            return None
        return UserMapper.to_domain(user_model)

    async def find_user_by_id(self, user_id: int) -> User | None:
        """Alias for get_user_details_by_id kept for callers that use this name."""
        return await self.get_user_details_by_id(user_id)

    async def find_user_by_email(self, email: str) -> User | None:
        """
        Retrieve the first user with the given email address.

        Args:
            email: The email address to look up

        Returns:
            The User domain entity, or None if not found
        """
        try:
            query = select(UserModel).where(UserModel.email == email).limit(1)
            result = await self._session.execute(query)
            user_model = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(f"Database error when retrieving user by email: {e}")
            raise

        if user_model is None:
            return None
        return UserMapper.to_domain(user_model)

    async def is_user_exists_with_email(self, email: str) -> bool:
        """
        Check if any user has the given email.

        Args:
            email: The email address to check

        Returns:
            True if a user with the given email exists, False otherwise
        """
        try:
            stmt = select(exists().where(UserModel.email == email))
            return bool(await self._session.scalar(stmt))
        except SQLAlchemyError as e:
            logger.error(f"Database error when checking if user exists by email: {e}")
            raise

    async def create(self, user: User) -> None:
        """
        Create a new user in the database.

        The database-assigned ``user_id`` and the stored ``created_at`` are
        written back onto ``user``.

        Args:
            user: The domain User entity to persist

        Raises:
            SQLAlchemyError: If there's an error during database operations
            IntegrityError: If there's a constraint violation (e.g., duplicate email)
        """
        user_model = UserMapper.to_persistence(user)
        self._session.add(user_model)
        await self._commit("creating user")
        await self._session.refresh(user_model)

        user.user_id = user_model.user_id
        user.created_at = ensure_utc(user_model.created_at)
        logger.debug(f"Created user {user.user_id}")

    async def update(self, user: User) -> None:
        """
        Replace an existing user record with the given entity.

        Args:
            user: The domain User entity carrying the existing ``user_id``

        Raises:
            EntityNotFoundException: If no user has ``user.user_id``
            SQLAlchemyError: If there's an error during database operations
        """
        existing_model = (
            await self._get_model(user.user_id) if user.user_id is not None else None
        )
        if existing_model is None:
            raise EntityNotFoundException("User", user.user_id)

        UserMapper.update_persistence_model(existing_model, user)
        await self._commit(f"updating user {user.user_id}")
        logger.debug(f"Updated user {user.user_id}")

    async def get_all_users(self) -> list[User]:
        """
        Retrieve every user.

        Returns:
            List of User domain entities, in the store's natural order
        """
        try:
            result = await self._session.execute(select(UserModel))
            user_models = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Database error when listing users: {e}")
            raise

        return [UserMapper.to_domain(model) for model in user_models]

    async def delete(self, user_id: int) -> bool:
        """
        Delete a user from the database.

        Args:
            user_id: The ID of the user to delete

        Returns:
            True if the user was deleted, False if not found

        Raises:
            SQLAlchemyError: If there's an error during database operations
        """
        user_model = await self._get_model(user_id)
        if user_model is None:
            return False

        await self._session.delete(user_model)
        await self._commit(f"deleting user {user_id}")
        logger.debug(f"Deleted user {user_id}")
        return True

    async def get_user_role(self, user_id: int) -> UserRole | None:
        """
        Look up a user's role.

        Returns:
            The user's role, or None if the user does not exist
        """
        user_model = await self._get_model(user_id)
        if user_model is None:
            return None
        return user_model.role
