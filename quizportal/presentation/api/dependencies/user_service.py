"""
User service dependency provider.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from quizportal.application.services.user_service import UserService
from quizportal.infrastructure.security.password.password_handler import PasswordHandler
from quizportal.presentation.api.dependencies.user_repository import UserRepositoryDep


@lru_cache
def get_password_handler() -> PasswordHandler:
    return PasswordHandler()


async def get_user_service(
    user_repository: UserRepositoryDep,
    password_handler: PasswordHandler = Depends(get_password_handler),
) -> UserService:
    """
    Provides a UserService bound to the request's repository.

    Returns:
        A UserService instance
    """
    return UserService(user_repository, password_handler)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
