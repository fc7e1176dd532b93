from quizportal.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    SQLAlchemyUserRepository,
)

__all__ = ["SQLAlchemyUserRepository"]
