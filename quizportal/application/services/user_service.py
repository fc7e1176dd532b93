"""
User Service Implementation.

Application service for user management: turns request DTOs into User
entities, enforces email uniqueness and role rules, hashes credentials and
delegates storage to an IUserRepository.
"""

import logging

from quizportal.core.domain.entities.user import User, UserRole
from quizportal.core.interfaces.repositories.user_repository_interface import IUserRepository
from quizportal.core.schemas.users import (
    AdminCreateUserDTO,
    AdminUpdateUserDTO,
    ChangePasswordDTO,
    UpdateUserDTO,
    UserResponseDTO,
)
from quizportal.domain.exceptions import DuplicateEntityException, InvalidRoleException
from quizportal.infrastructure.security.password.password_handler import PasswordHandler

logger = logging.getLogger(__name__)


def parse_role(value: str) -> UserRole:
    """Parse a role string case-insensitively, raising InvalidRoleException if unknown."""
    try:
        return UserRole.parse(value)
    except ValueError as e:
        raise InvalidRoleException(value) from e


class UserService:
    """
    Service for managing users.

    Only this layer checks for duplicate emails and parses roles; the
    repository stores whatever entity it is given.
    """

    def __init__(self, user_repository: IUserRepository, password_handler: PasswordHandler):
        """
        Initialize the service with its collaborators.

        Args:
            user_repository: Repository for user persistence
            password_handler: Hashing and verification of credentials
        """
        self.user_repository = user_repository
        self.password_handler = password_handler

    async def get_all_users(self) -> list[UserResponseDTO]:
        users = await self.user_repository.get_all_users()
        return [UserResponseDTO.from_entity(user) for user in users]

    async def get_user_by_id(self, user_id: int) -> UserResponseDTO | None:
        user = await self.user_repository.get_user_details_by_id(user_id)
        return UserResponseDTO.from_entity(user) if user else None

    async def get_user_by_email(self, email: str) -> UserResponseDTO | None:
        user = await self.user_repository.find_user_by_email(email)
        return UserResponseDTO.from_entity(user) if user else None

    async def user_exists_by_email(self, email: str) -> bool:
        return await self.user_repository.is_user_exists_with_email(email)

    async def create_user(self, create_user_dto: AdminCreateUserDTO) -> UserResponseDTO:
        """
        Create a user on behalf of an administrator.

        When no password is supplied a random one is generated. Either way the
        account is flagged as using a default password.

        Raises:
            DuplicateEntityException: If the email is already registered
            InvalidRoleException: If the role string is not a known role
        """
        if await self.user_exists_by_email(create_user_dto.email):
            raise DuplicateEntityException("email", create_user_dto.email)

        role = parse_role(create_user_dto.role)
        password = create_user_dto.password or self.password_handler.generate_secure_password()

        user = User(
            full_name=create_user_dto.full_name,
            email=create_user_dto.email,
            password=self.password_handler.get_password_hash(password),
            role=role,
            is_default_password=True,
        )

        try:
            await self.user_repository.create(user)
        except Exception as e:
            logger.error(f"Error creating user: {e}")
            raise

        logger.info(f"User created successfully: {user.user_id}")
        return UserResponseDTO.from_entity(user)

    async def update_user(
        self, user_id: int, update_user_dto: UpdateUserDTO
    ) -> UserResponseDTO | None:
        """
        Apply a self-service profile update.

        Returns:
            The updated user, or None if the user does not exist

        Raises:
            DuplicateEntityException: If the new email belongs to another user
        """
        user = await self.user_repository.get_user_details_by_id(user_id)
        if user is None:
            return None

        await self._apply_profile_changes(user, update_user_dto)
        return await self._save(user)

    async def admin_update_user(
        self, user_id: int, update_user_dto: AdminUpdateUserDTO
    ) -> UserResponseDTO | None:
        """
        Apply an administrator update, which may also change the role.

        Returns:
            The updated user, or None if the user does not exist

        Raises:
            DuplicateEntityException: If the new email belongs to another user
            InvalidRoleException: If the role string is not a known role
        """
        user = await self.user_repository.get_user_details_by_id(user_id)
        if user is None:
            return None

        await self._apply_profile_changes(user, update_user_dto)
        if update_user_dto.role:
            user.role = parse_role(update_user_dto.role)

        return await self._save(user)

    async def change_user_password(
        self, user_id: int, change_password_dto: ChangePasswordDTO
    ) -> bool:
        """
        Replace a user's password after checking the current one.

        Returns:
            False if the user does not exist or the current password is wrong
        """
        user = await self.user_repository.get_user_details_by_id(user_id)
        if user is None:
            return False

        if not self.password_handler.verify_password(
            change_password_dto.current_password, user.password
        ):
            return False

        user.password = self.password_handler.get_password_hash(change_password_dto.new_password)
        user.is_default_password = False

        try:
            await self.user_repository.update(user)
        except Exception as e:
            logger.error(f"Error changing password for user {user_id}: {e}")
            raise

        logger.info(f"Password changed successfully for user {user_id}")
        return True

    async def delete_user(self, user_id: int) -> bool:
        try:
            deleted = await self.user_repository.delete(user_id)
        except Exception as e:
            logger.error(f"Error deleting user {user_id}: {e}")
            raise

        if deleted:
            logger.info(f"User deleted successfully: {user_id}")
        return deleted

    async def can_update_role(self, admin_user_id: int, target_user_id: int) -> bool:
        """
        Decide whether ``admin_user_id`` may change the role of ``target_user_id``.

        Admins cannot change their own role through this path.
        """
        if admin_user_id == target_user_id:
            return False

        admin_user = await self.user_repository.find_user_by_id(admin_user_id)
        if admin_user is None:
            logger.warning(f"Admin user {admin_user_id} not found")
            return False

        if not admin_user.is_admin:
            logger.warning(
                f"Non-admin user {admin_user_id} attempted to update role of user {target_user_id}"
            )
            return False

        target_user = await self.user_repository.find_user_by_id(target_user_id)
        if target_user is None:
            logger.warning(f"Target user {target_user_id} not found")
            return False

        logger.info(f"Admin {admin_user_id} is authorized to update role of user {target_user_id}")
        return True

    async def get_user_role(self, user_id: int) -> UserRole | None:
        return await self.user_repository.get_user_role(user_id)

    async def mark_password_as_default(self, user_id: int) -> None:
        user = await self.user_repository.get_user_details_by_id(user_id)
        if user is None:
            logger.warning(f"User {user_id} not found for marking default password")
            return

        user.is_default_password = True
        await self.user_repository.update(user)
        logger.info(f"Marked password as default for user {user_id}")

    async def verify_password(self, user_id: int, password: str) -> bool:
        user = await self.user_repository.get_user_details_by_id(user_id)
        if user is None:
            return False
        return self.password_handler.verify_password(password, user.password)

    async def _apply_profile_changes(self, user: User, changes: UpdateUserDTO) -> None:
        # Empty strings are treated the same as omitted fields
        if changes.email and changes.email != user.email:
            if await self.user_exists_by_email(changes.email):
                raise DuplicateEntityException("email", changes.email)
            user.email = changes.email

        if changes.full_name:
            user.full_name = changes.full_name

    async def _save(self, user: User) -> UserResponseDTO:
        try:
            await self.user_repository.update(user)
        except Exception as e:
            logger.error(f"Error updating user {user.user_id}: {e}")
            raise

        logger.info(f"User updated successfully: {user.user_id}")
        return UserResponseDTO.from_entity(user)
