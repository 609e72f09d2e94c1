"""Customer ORM — persists a store customer.

Invariants:
    - id is UUID primary key (client-side default)
    - email is UNIQUE at the store level (source of truth under concurrent writers)
    - No relationship back to orders: deleting a referenced customer is
      blocked by the orders foreign key, not cascaded

Design Decisions:
    - birth_date as Date (no time component): compared against UTC today
"""

import uuid
from datetime import date

from sqlalchemy import String, Date
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Customer(Base):
    """Customer entity."""
    __tablename__ = "customers"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(160), nullable=False)
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True,
    )
    phone: Mapped[str] = mapped_column(String(40), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
