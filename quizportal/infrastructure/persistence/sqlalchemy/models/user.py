"""
SQLAlchemy model for user data.

This module implements the PERSISTENCE model for User entities.
The DOMAIN entity is in quizportal.core.domain.entities.user; the repository
converts between the two through UserMapper.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from quizportal.core.domain.entities.user import UserRole
from quizportal.domain.utils.datetime_utils import now_utc
from quizportal.infrastructure.persistence.sqlalchemy.config.base import Base


class UserModel(Base):
    """
    SQLAlchemy model for the 'users' table.

    Email uniqueness is backed by the IX_User_Email index; callers still check
    for an existing email before inserting.
    """

    __tablename__ = "users"
    __table_args__ = (Index("IX_User_Email", "email", unique=True),)

    user_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True, comment="Unique user identifier"
    )
    full_name: Mapped[str] = mapped_column(String(40), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False, comment="Hashed credential")
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role"), nullable=False, comment="Primary user role"
    )
    is_default_password: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False, comment="Whether the credential was system-assigned"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=now_utc, nullable=False
    )

    def __repr__(self) -> str:
        """String representation of the user."""
        return f"<UserModel {self.user_id} ({self.role})>"
