"""
Base domain exceptions.

Every exception raised deliberately by this package derives from
DomainException. Storage driver errors are not wrapped and do not.
"""


class DomainException(Exception):
    """
    Base exception for all domain-specific exceptions.

    Attributes:
        message: A human-readable error message
        code: A stable error code for machine processing
    """

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str = "A domain error occurred", code: str | None = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        return self.message
