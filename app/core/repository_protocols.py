"""Boundary Protocols — contracts between core/handlers and the store.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Read-only queries (list_all, get, get_detail) are separate from
      load-for-mutation queries (load_for_update)
    - Absence is returned as None; callers raise ResourceNotFoundError

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Entity shapes declared as Protocols so handlers stay decoupled from the ORM
"""

from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Protocol
from uuid import UUID


class OrderLineLike(Protocol):
    """Structural contract for a requested order line (before persistence)."""
    product_id: UUID | None
    quantity: int | None


class CustomerLike(Protocol):
    id: UUID
    name: str
    email: str
    phone: str
    birth_date: date


class ProductLike(Protocol):
    id: UUID
    title: str
    description: str
    slug: str
    price: Decimal


class OrderLineRecordLike(Protocol):
    """A persisted order line: total is the snapshot taken at creation."""
    id: UUID
    product_id: UUID
    line_number: int
    quantity: int
    total: Decimal


class OrderLike(Protocol):
    id: UUID
    customer_id: UUID
    created_at: datetime
    updated_at: datetime
    lines: Sequence[OrderLineRecordLike]


class CustomerRepository(Protocol):
    """Contract for customer persistence — implemented by shell."""
    async def list_all(self) -> Sequence[CustomerLike]: ...
    async def get(self, customer_id: UUID) -> CustomerLike | None: ...
    async def load_for_update(self, customer_id: UUID) -> CustomerLike | None: ...
    async def email_in_use(
        self, email: str, exclude_id: UUID | None = None,
    ) -> bool: ...
    def add(self, customer: CustomerLike) -> None: ...
    async def delete(self, customer: CustomerLike) -> None: ...


class ProductRepository(Protocol):
    """Contract for product persistence — implemented by shell."""
    async def list_all(self) -> Sequence[ProductLike]: ...
    async def get(self, product_id: UUID) -> ProductLike | None: ...
    async def load_for_update(self, product_id: UUID) -> ProductLike | None: ...
    async def slug_in_use(
        self, slug: str, exclude_id: UUID | None = None,
    ) -> bool: ...
    async def find_many(
        self, product_ids: Sequence[UUID],
    ) -> dict[UUID, ProductLike]: ...
    def add(self, product: ProductLike) -> None: ...
    async def delete(self, product: ProductLike) -> None: ...


class OrderRepository(Protocol):
    """Contract for order persistence — implemented by shell."""
    async def get_detail(self, order_id: UUID) -> OrderLike | None: ...
    def add(self, order: OrderLike) -> None: ...
