"""
Core exceptions package.

Request-level exceptions raised before any repository call.
"""

from quizportal.core.exceptions.validation import ValidationError

__all__ = ["ValidationError"]
