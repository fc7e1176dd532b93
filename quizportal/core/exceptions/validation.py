"""
Validation exceptions for the application.

Raised when a request payload fails the declarative constraints of its DTO.
"""

from typing import Any

from quizportal.domain.exceptions.base import DomainException


class ValidationError(DomainException):
    """
    Exception raised when input validation fails.

    ``errors`` carries one entry per failed field, in the shape produced by
    pydantic (``loc``, ``msg``, ``type``).
    """

    def __init__(self, message: str = "Validation error", errors: list[dict[str, Any]] | None = None):
        super().__init__(message, code="VALIDATION_ERROR")
        self.errors = errors or []

    def __str__(self) -> str:
        if self.errors:
            return f"{self.message} - {self.errors}"
        return self.message

    @property
    def fields(self) -> list[str]:
        """Dotted names of the fields that failed validation."""
        return [".".join(str(part) for part in error.get("loc", ())) for error in self.errors]
