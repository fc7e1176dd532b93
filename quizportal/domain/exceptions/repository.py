"""
Repository exceptions module.

Lookups report absence with None or False. These exceptions cover the
remaining cases: a caller contract violation and a uniqueness conflict.
"""

from typing import Any

from quizportal.domain.exceptions.base import DomainException


class RepositoryException(DomainException):
    """Base exception for repository-related errors."""

    code = "REPOSITORY_ERROR"


class EntityNotFoundException(RepositoryException):
    """
    Raised when an operation requires an existing record and there is none.

    Used by ``update``, which must be given the id of a stored record.
    """

    code = "ENTITY_NOT_FOUND"

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class DuplicateEntityException(RepositoryException):
    """Raised when a value that must be unique is already taken."""

    code = "DUPLICATE_ENTITY"

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"{field.capitalize()} already exists")
