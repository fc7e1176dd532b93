"""Domain entities."""

from quizportal.core.domain.entities.user import User, UserRole

__all__ = ["User", "UserRole"]
