"""Order Validation & Arithmetic — pure checks and totals for order creation.

Invariants:
    - validate_order_request runs before any store lookup: a bad quantity
      rejects the whole order with nothing read or written
    - quantity is bounded by the stored column (MAX_QUANTITY); a line total
      above MAX_MONEY is rejected once prices are known, before any write
    - line_total = unit price x quantity, computed once at creation
    - order_total sums snapshotted line totals, never current prices
    - distinct_product_ids preserves first-seen order (stable batch lookup)
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from uuid import UUID

from app.core.domain_types import EMPTY_ID, MAX_MONEY, MAX_QUANTITY
from app.core.errors import BadInputError
from app.core.repository_protocols import OrderLineLike


def validate_order_request(
    customer_id: UUID | None, lines: Sequence[OrderLineLike] | None,
) -> None:
    """Raise BadInputError for the first invalid part of an order request."""
    if customer_id is None or customer_id == EMPTY_ID:
        raise BadInputError("CustomerId is required", "customerId")
    if not lines:
        raise BadInputError("Order must have at least one line", "lines")
    for line in lines:
        if line.product_id is None or line.product_id == EMPTY_ID:
            raise BadInputError("ProductId is required", "productId")
        if line.quantity is None or line.quantity <= 0:
            raise BadInputError("Quantity must be greater than zero", "quantity")
        if line.quantity > MAX_QUANTITY:
            raise BadInputError(
                f"Quantity must not exceed {MAX_QUANTITY}", "quantity",
            )


def validate_line_total(total: Decimal) -> None:
    """Reject a computed line total that would not fit the stored column."""
    if total > MAX_MONEY:
        raise BadInputError(
            f"Line total must not exceed {MAX_MONEY}", "quantity",
        )


def distinct_product_ids(lines: Iterable[OrderLineLike]) -> list[UUID]:
    seen: dict[UUID, None] = {}
    for line in lines:
        seen.setdefault(line.product_id, None)
    return list(seen)


def all_products_found(requested: Sequence[UUID], found: Iterable[UUID]) -> bool:
    return set(requested) <= set(found)


def line_total(unit_price: Decimal, quantity: int) -> Decimal:
    return unit_price * quantity


def order_total(line_totals: Iterable[Decimal]) -> Decimal:
    return sum(line_totals, Decimal("0"))
