"""Order Handlers — create and get-by-id.

Invariants:
    - Request shape validated (core) before any store access
    - Customer existence checked before products; products resolved in ONE batch query
    - Any missing product -> ResourceNotFoundError and nothing is written
    - A line total too large for the stored column -> BadInputError, nothing written
    - Order and all its lines committed together (single unit of work)
    - Line total = product price x quantity at creation (snapshot)
    - total_amount = sum of snapshotted line totals

Design Decisions:
    - Create and get share OrderDetailResponse: create projects from the
      in-memory aggregate plus the already-resolved products, no re-read
    - No update/delete operations for orders
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ResourceType
from app.core.errors import ResourceNotFoundError
from app.core.repository_protocols import (
    CustomerRepository, OrderRepository, ProductRepository,
)
from app.core.validate_order import (
    all_products_found, distinct_product_ids, line_total, order_total,
    validate_line_total, validate_order_request,
)
from app.infrastructure.database import commit_or_conflict
from app.infrastructure.repositories import (
    CustomerStore, OrderStore, ProductStore,
)
from app.models.customer import Customer
from app.models.order import Order
from app.models.order_line import OrderLine
from app.models.product import Product
from app.schemas.order import (
    OrderCreate, OrderDetailResponse, OrderLineResponse,
)

logger = logging.getLogger(__name__)

CUSTOMER_NOT_FOUND = "Customer not found"
PRODUCTS_NOT_FOUND = "One or more products not found"
ORDER_NOT_FOUND = "Order not found"


class OrderHandlers:
    """Order handlers over one unit of work."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.customers: CustomerRepository = CustomerStore(db)
        self.products: ProductRepository = ProductStore(db)
        self.orders: OrderRepository = OrderStore(db)

    async def create_order(self, body: OrderCreate) -> OrderDetailResponse:
        validate_order_request(body.customer_id, body.lines)

        customer = await self.customers.get(body.customer_id)
        if customer is None:
            raise ResourceNotFoundError(
                CUSTOMER_NOT_FOUND, ResourceType.CUSTOMER.value,
                str(body.customer_id),
            )

        product_ids = distinct_product_ids(body.lines)
        products = await self.products.find_many(product_ids)
        if not all_products_found(product_ids, products):
            raise ResourceNotFoundError(
                PRODUCTS_NOT_FOUND, ResourceType.PRODUCT.value,
            )

        totals = [
            line_total(products[line.product_id].price, line.quantity)
            for line in body.lines
        ]
        for total in totals:
            validate_line_total(total)

        now = datetime.now(timezone.utc)
        order = Order(customer_id=customer.id, created_at=now, updated_at=now)
        order.lines = [
            OrderLine(
                product_id=line.product_id,
                line_number=position,
                quantity=line.quantity,
                total=total,
            )
            for position, (line, total) in enumerate(
                zip(body.lines, totals), start=1,
            )
        ]
        self.orders.add(order)
        await commit_or_conflict(self.db, "Order references changed while saving")

        logger.info(
            f"Order created with {len(order.lines)} line(s)",
            extra={"order_id": str(order.id), "customer_id": str(customer.id)},
        )
        return _project(order, customer, products)

    async def get_order(self, order_id: UUID) -> OrderDetailResponse:
        order = await self.orders.get_detail(order_id)
        if order is None:
            raise ResourceNotFoundError(
                ORDER_NOT_FOUND, ResourceType.ORDER.value, str(order_id),
            )
        products = {line.product_id: line.product for line in order.lines}
        return _project(order, order.customer, products)


def _project(
    order: Order, customer: Customer, products: dict[UUID, Product],
) -> OrderDetailResponse:
    """Build the order detail from the aggregate and its products."""
    lines = [
        OrderLineResponse(
            id=line.id,
            product_id=line.product_id,
            product_title=products[line.product_id].title,
            quantity=line.quantity,
            unit_price=products[line.product_id].price,
            total=line.total,
        )
        for line in order.lines
    ]
    return OrderDetailResponse(
        id=order.id,
        customer_id=order.customer_id,
        customer_name=customer.name,
        created_at=order.created_at,
        updated_at=order.updated_at,
        total_amount=order_total(line.total for line in order.lines),
        lines=lines,
    )
