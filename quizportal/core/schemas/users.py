"""Core-layer user DTOs.

Request and response shapes for user management. Purely data-centric:
declarative field constraints only, no persistence or framework imports.
"""
from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from quizportal.core.domain.entities.user import User

__all__: list[str] = [
    "AdminCreateUserDTO",
    "AdminUpdateUserDTO",
    "ChangePasswordDTO",
    "UpdateUserDTO",
    "UserResponseDTO",
]

FULL_NAME_MAX_LENGTH = 40
EMAIL_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 6

BoundedEmail = Annotated[EmailStr, Field(max_length=EMAIL_MAX_LENGTH)]


class AdminCreateUserDTO(BaseModel):
    """Payload for an administrator creating a user."""

    full_name: str = Field(..., min_length=1, max_length=FULL_NAME_MAX_LENGTH)
    email: BoundedEmail
    role: str = Field(..., min_length=1)
    # A default password is generated when omitted
    password: str | None = None


class UpdateUserDTO(BaseModel):
    """Self-service profile update. Role is not part of this payload."""

    model_config = ConfigDict(extra="forbid")

    full_name: str | None = Field(default=None, max_length=FULL_NAME_MAX_LENGTH)
    email: BoundedEmail | None = None


class AdminUpdateUserDTO(UpdateUserDTO):
    """Administrator update; the only payload allowed to change a role."""

    role: str | None = None


class ChangePasswordDTO(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)


class UserResponseDTO(BaseModel):
    """Outbound projection of a user. Never carries the credential."""

    user_id: int
    full_name: str
    email: str
    role: str
    is_default_password: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> UserResponseDTO:
        return cls(
            user_id=user.user_id,
            full_name=user.full_name,
            email=user.email,
            role=user.role.value,
            is_default_password=user.is_default_password,
            created_at=user.created_at,
        )
