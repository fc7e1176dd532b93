"""User-specific domain exceptions."""

from quizportal.domain.exceptions.base import DomainException


class InvalidRoleException(DomainException):
    """Raised when a role string does not name a known user role."""

    code = "INVALID_ROLE"

    def __init__(self, role: str | None):
        self.role = role
        super().__init__(f"Invalid role: {role}")
