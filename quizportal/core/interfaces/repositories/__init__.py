"""Repository interfaces."""

from quizportal.core.interfaces.repositories.user_repository_interface import IUserRepository

__all__ = ["IUserRepository"]
