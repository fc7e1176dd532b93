"""
SQLAlchemy base configuration.

This module provides the declarative base for SQLAlchemy models.
Follows SQLAlchemy 2.0 typing patterns.
"""

from __future__ import annotations

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase

# Single metadata instance shared by all models
metadata = MetaData()


class Base(DeclarativeBase, AsyncAttrs):
    """
    SQLAlchemy 2.0 declarative base with async support.

    Combines DeclarativeBase for proper typing with AsyncAttrs for async support.
    """

    metadata = metadata
