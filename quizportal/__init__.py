"""
QuizPortal user-data access layer.

Repository, DTOs and application service for the QuizPortal ``User`` entity.
"""

__version__ = "1.0.0"
