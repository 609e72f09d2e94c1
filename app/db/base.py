"""SQLAlchemy Declarative Base — shared base class and column types for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - UTCDateTime values are always timezone-aware UTC, on write and on read,
      whatever the backend (SQLite stores no offset)

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator


class Base(DeclarativeBase):
    """Base class for all BugStore ORM models."""
    pass


class UTCDateTime(TypeDecorator):
    """DateTime stored as UTC and loaded back with tzinfo=UTC."""
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError("UTCDateTime requires a timezone-aware datetime")
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: datetime | None, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
