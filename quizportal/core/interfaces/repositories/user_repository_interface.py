"""
Interface definition for User Repository.

Defines the contract for data access operations related to User entities.
Callers depend on this abstract class only; concrete adapters live in the
infrastructure layer.

Not-found conditions are reported as ``None`` or ``False``, never raised.
Storage failures propagate to the caller unchanged.
"""

from abc import ABC, abstractmethod

from quizportal.core.domain.entities.user import User, UserRole


class IUserRepository(ABC):
    """Abstract base class for user data persistence operations."""

    @abstractmethod
    async def get_user_details_by_id(self, user_id: int) -> User | None:
        """Retrieve a user by their integer ID, or None if absent."""
        pass

    @abstractmethod
    async def find_user_by_email(self, email: str) -> User | None:
        """Retrieve the first user whose email equals ``email``, or None."""
        pass

    @abstractmethod
    async def is_user_exists_with_email(self, email: str) -> bool:
        """Return True iff at least one user has the given email."""
        pass

    @abstractmethod
    async def create(self, user: User) -> None:
        """
        Persist a new user.

        The generated ``user_id`` is written back onto ``user``. Email
        uniqueness is the caller's concern (see ``is_user_exists_with_email``).
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> None:
        """
        Replace the stored record identified by ``user.user_id`` with ``user``.

        Full-record replace, last write wins.

        Raises:
            EntityNotFoundException: If no record carries ``user.user_id``
        """
        pass

    @abstractmethod
    async def get_all_users(self) -> list[User]:
        """Return every stored user, in no guaranteed order."""
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Delete a user. Returns True if a row was removed, False if not found."""
        pass

    @abstractmethod
    async def get_user_role(self, user_id: int) -> UserRole | None:
        """Return the user's role, or None if the user does not exist."""
        pass

    @abstractmethod
    async def find_user_by_id(self, user_id: int) -> User | None:
        """Same lookup as ``get_user_details_by_id``; kept for callers using this name."""
        pass
