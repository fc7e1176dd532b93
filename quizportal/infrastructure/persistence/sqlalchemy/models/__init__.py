"""SQLAlchemy ORM models."""

from quizportal.infrastructure.persistence.sqlalchemy.models.user import UserModel

__all__ = ["UserModel"]
