"""Product ORM — persists a catalogue product.

Invariants:
    - slug is UNIQUE at the store level
    - price is stored as Numeric(12, 2) and read back as Decimal
"""

import uuid
from decimal import Decimal

from sqlalchemy import String, Text, Numeric
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Product(Base):
    """Product entity."""
    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(
        String(200), nullable=False, unique=True,
    )
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
