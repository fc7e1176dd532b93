"""
User Entity Module

This module defines the User entity and related types for the domain layer.
Following clean architecture principles, this module contains only domain entities
without any dependency on infrastructure or application layers.
"""

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from quizportal.domain.utils.datetime_utils import now_utc


class UserRole(str, enum.Enum):
    """User roles within the system."""

    ADMIN = "Admin"
    TEACHER = "Teacher"
    STUDENT = "Student"

    @classmethod
    def parse(cls, value: "str | UserRole") -> "UserRole":
        """
        Parse a role from its string form, ignoring case.

        Args:
            value: Role name such as ``"admin"`` or ``"Teacher"``, or a role member

        Returns:
            The matching role

        Raises:
            ValueError: If the value does not name a known role
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for role in cls:
            if role.value.lower() == normalized:
                return role
        raise ValueError(f"{value!r} is not a valid {cls.__name__}")


class User(BaseModel):
    """User domain entity representing a user in the system."""

    user_id: int | None = Field(default=None, description="Integer identifier, assigned on create")
    full_name: str = Field(..., max_length=40, description="User's full name")
    email: str = Field(..., max_length=100, description="User's email address")
    password: str = Field(..., repr=False, description="Hashed credential")
    role: UserRole = Field(..., description="User's role in the system")
    is_default_password: bool = Field(
        default=False, description="Whether the credential was system-assigned"
    )
    created_at: datetime = Field(default_factory=now_utc, description="When the user was created")

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def has_role(self, role: UserRole | str) -> bool:
        """Check if the user has a specific role (case-insensitive for strings)."""
        try:
            return self.role == UserRole.parse(role)
        except ValueError:
            return False
