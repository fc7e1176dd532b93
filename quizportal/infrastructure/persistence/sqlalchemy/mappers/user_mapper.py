"""
User entity to SQLAlchemy model mapper.

This module provides bidirectional mapping between the domain User entity and
the SQLAlchemy User model, following clean architecture principles.
"""

from quizportal.core.domain.entities.user import User
from quizportal.domain.utils.datetime_utils import ensure_utc
from quizportal.infrastructure.persistence.sqlalchemy.models.user import UserModel


class UserMapper:
    """
    Maps between domain User entities and SQLAlchemy User models.

    This follows the Adapter pattern to translate between domain and persistence layers,
    preserving clean architecture boundaries.
    """

    @staticmethod
    def to_domain(model: UserModel) -> User:
        """
        Convert a SQLAlchemy User model to a domain User entity.

        Args:
            model: SQLAlchemy User model instance

        Returns:
            Equivalent domain User entity
        """
        return User(
            user_id=model.user_id,
            full_name=model.full_name,
            email=model.email,
            password=model.password,
            role=model.role,
            is_default_password=model.is_default_password,
            created_at=ensure_utc(model.created_at),
        )

    @staticmethod
    def to_persistence(entity: User) -> UserModel:
        """
        Convert a domain User entity to a new SQLAlchemy User model.

        ``user_id`` is left for the database to assign when the entity has none.
        """
        model = UserMapper.update_persistence_model(UserModel(), entity)
        if entity.user_id is not None:
            model.user_id = entity.user_id
        return model

    @staticmethod
    def update_persistence_model(model: UserModel, entity: User) -> UserModel:
        """
        Overwrite every mapped column of ``model`` with the entity's values.

        This is a full replace: fields are copied whether or not they changed,
        and no field is skipped for being empty.

        Args:
            model: Existing SQLAlchemy User model to update
            entity: Domain User entity with new values

        Returns:
            The same model instance, updated
        """
        model.full_name = entity.full_name
        model.email = entity.email
        model.password = entity.password
        model.role = entity.role
        model.is_default_password = entity.is_default_password
        model.created_at = entity.created_at
        return model
