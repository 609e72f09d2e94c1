"""SQLAlchemy Repositories — store access for customers, products and orders.

Invariants:
    - Read-only queries (list_all, get, get_detail, *_in_use, find_many) never lock rows
    - load_for_update issues SELECT ... FOR UPDATE (PostgreSQL locks the row,
      SQLite ignores the clause)
    - Absence is None — never raises; handlers decide the not-found error
    - Repositories never commit: the handler owns the unit of work

Design Decisions:
    - Thin classes over the request's AsyncSession: one instance per handler
    - find_many resolves every product in a single IN query
    - get_detail eager-loads customer, lines and line products (relationships are lazy="raise")
"""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.customer import Customer
from app.models.order import Order
from app.models.order_line import OrderLine
from app.models.product import Product


class CustomerStore:
    """CustomerRepository backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> Sequence[Customer]:
        result = await self.db.execute(select(Customer).order_by(Customer.name))
        return result.scalars().all()

    async def get(self, customer_id: UUID) -> Customer | None:
        result = await self.db.execute(
            select(Customer).where(Customer.id == customer_id),
        )
        return result.scalar_one_or_none()

    async def load_for_update(self, customer_id: UUID) -> Customer | None:
        result = await self.db.execute(
            select(Customer).where(Customer.id == customer_id).with_for_update(),
        )
        return result.scalar_one_or_none()

    async def email_in_use(
        self, email: str, exclude_id: UUID | None = None,
    ) -> bool:
        condition = Customer.email == email
        if exclude_id is not None:
            condition = condition & (Customer.id != exclude_id)
        result = await self.db.execute(select(exists().where(condition)))
        return bool(result.scalar())

    def add(self, customer: Customer) -> None:
        self.db.add(customer)

    async def delete(self, customer: Customer) -> None:
        await self.db.delete(customer)


class ProductStore:
    """ProductRepository backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> Sequence[Product]:
        result = await self.db.execute(select(Product).order_by(Product.title))
        return result.scalars().all()

    async def get(self, product_id: UUID) -> Product | None:
        result = await self.db.execute(
            select(Product).where(Product.id == product_id),
        )
        return result.scalar_one_or_none()

    async def load_for_update(self, product_id: UUID) -> Product | None:
        result = await self.db.execute(
            select(Product).where(Product.id == product_id).with_for_update(),
        )
        return result.scalar_one_or_none()

    async def slug_in_use(
        self, slug: str, exclude_id: UUID | None = None,
    ) -> bool:
        condition = Product.slug == slug
        if exclude_id is not None:
            condition = condition & (Product.id != exclude_id)
        result = await self.db.execute(select(exists().where(condition)))
        return bool(result.scalar())

    async def find_many(
        self, product_ids: Sequence[UUID],
    ) -> dict[UUID, Product]:
        """Resolve products by id in one query. Missing ids are simply absent."""
        if not product_ids:
            return {}
        result = await self.db.execute(
            select(Product).where(Product.id.in_(list(product_ids))),
        )
        return {p.id: p for p in result.scalars().all()}

    def add(self, product: Product) -> None:
        self.db.add(product)

    async def delete(self, product: Product) -> None:
        await self.db.delete(product)


class OrderStore:
    """OrderRepository backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_detail(self, order_id: UUID) -> Order | None:
        """Order with its customer and every line's product loaded."""
        result = await self.db.execute(
            select(Order)
            .where(Order.id == order_id)
            .options(
                selectinload(Order.customer),
                selectinload(Order.lines).selectinload(OrderLine.product),
            ),
        )
        return result.scalar_one_or_none()

    def add(self, order: Order) -> None:
        self.db.add(order)
