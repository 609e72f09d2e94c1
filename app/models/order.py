"""Order ORM — aggregate root for a customer's purchase.

Invariants:
    - Always belongs to a Customer (customer_id FK, RESTRICT on delete)
    - Owns its lines: created together, deleted together (cascade)
    - created_at == updated_at at creation (same instant)
    - created_at/updated_at are UTC-aware on every backend (UTCDateTime)
    - lines ordered by line_number (request order)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base, UTCDateTime


class Order(Base):
    """Order aggregate root — owns its OrderLines."""
    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("customers.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    customer: Mapped["Customer"] = relationship("Customer", lazy="raise")
    lines: Mapped[list["OrderLine"]] = relationship(
        "OrderLine", back_populates="order",
        cascade="all, delete-orphan", order_by="OrderLine.line_number",
        lazy="raise",
    )
