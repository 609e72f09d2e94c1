"""Order Schemas — creation payload and order detail projection.

Invariants:
    - OrderLineInput satisfies core OrderLineLike (product_id, quantity)
    - OrderDetailResponse is returned by both create and get-by-id
    - unit_price is the product's current price; total is the snapshotted line total
"""

from datetime import datetime
from uuid import UUID

from app.core.domain_types import Money
from app.schemas.base import CamelModel


class OrderLineInput(CamelModel):
    product_id: UUID | None = None
    quantity: int | None = None


class OrderCreate(CamelModel):
    """Body of POST /v1/orders."""
    customer_id: UUID | None = None
    lines: list[OrderLineInput] | None = None


class OrderLineResponse(CamelModel):
    id: UUID
    product_id: UUID
    product_title: str
    quantity: int
    unit_price: Money
    total: Money


class OrderDetailResponse(CamelModel):
    id: UUID
    customer_id: UUID
    customer_name: str
    created_at: datetime
    updated_at: datetime
    total_amount: Money
    lines: list[OrderLineResponse]
