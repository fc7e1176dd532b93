"""
Domain exceptions package.

Exceptions raised by repositories and application services.
"""

from quizportal.domain.exceptions.base import DomainException
from quizportal.domain.exceptions.repository import (
    DuplicateEntityException,
    EntityNotFoundException,
    RepositoryException,
)
from quizportal.domain.exceptions.user_exceptions import InvalidRoleException

__all__ = [
    "DomainException",
    "DuplicateEntityException",
    "EntityNotFoundException",
    "InvalidRoleException",
    "RepositoryException",
]
