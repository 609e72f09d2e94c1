"""Order Validation & Arithmetic — tests for request checks and totals.

Tests cover:
    - customer id required (missing or all-zero UUID)
    - at least one line; each line needs a product id and quantity > 0
    - distinct_product_ids keeps first-seen order
    - line_total / order_total exact Decimal arithmetic
    - quantity and line total bounded by their stored columns
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from app.core.domain_types import EMPTY_ID
from app.core.errors import BadInputError
from app.core.validate_order import (
    all_products_found, distinct_product_ids, line_total, order_total,
    validate_line_total, validate_order_request,
)


@dataclass
class Line:
    product_id: UUID | None
    quantity: int | None


def test_valid_request_passes():
    validate_order_request(uuid4(), [Line(uuid4(), 1), Line(uuid4(), 3)])


@pytest.mark.parametrize("customer_id", [None, EMPTY_ID])
def test_customer_id_required(customer_id):
    with pytest.raises(BadInputError) as exc_info:
        validate_order_request(customer_id, [Line(uuid4(), 1)])
    assert exc_info.value.message == "CustomerId is required"


@pytest.mark.parametrize("lines", [None, []])
def test_at_least_one_line(lines):
    with pytest.raises(BadInputError) as exc_info:
        validate_order_request(uuid4(), lines)
    assert exc_info.value.message == "Order must have at least one line"


@pytest.mark.parametrize("quantity", [0, -3, None])
def test_non_positive_quantity_rejected(quantity):
    with pytest.raises(BadInputError) as exc_info:
        validate_order_request(uuid4(), [Line(uuid4(), 2), Line(uuid4(), quantity)])
    assert exc_info.value.message == "Quantity must be greater than zero"


@pytest.mark.parametrize("product_id", [None, EMPTY_ID])
def test_product_id_required(product_id):
    with pytest.raises(BadInputError) as exc_info:
        validate_order_request(uuid4(), [Line(product_id, 1)])
    assert exc_info.value.message == "ProductId is required"


def test_customer_checked_before_lines():
    with pytest.raises(BadInputError) as exc_info:
        validate_order_request(None, [])
    assert exc_info.value.message == "CustomerId is required"


def test_distinct_product_ids_preserves_first_seen_order():
    a, b = uuid4(), uuid4()
    lines = [Line(b, 1), Line(a, 1), Line(b, 2)]
    assert distinct_product_ids(lines) == [b, a]


def test_all_products_found():
    a, b = uuid4(), uuid4()
    assert all_products_found([a, b], {a: "x", b: "y"})
    assert not all_products_found([a, b], {a: "x"})


def test_line_total_multiplies_price_by_quantity():
    assert line_total(Decimal("10"), 2) == Decimal("20")
    assert line_total(Decimal("0.10"), 3) == Decimal("0.30")


def test_order_total_sums_lines():
    assert order_total([Decimal("20"), Decimal("20")]) == Decimal("40")


def test_order_total_of_nothing_is_zero():
    assert order_total([]) == Decimal("0")


def test_quantity_at_column_limit_accepted():
    validate_order_request(uuid4(), [Line(uuid4(), 2**31 - 1)])


def test_quantity_above_column_limit_rejected():
    with pytest.raises(BadInputError) as exc_info:
        validate_order_request(uuid4(), [Line(uuid4(), 10**20)])
    assert exc_info.value.message == "Quantity must not exceed 2147483647"


def test_line_total_within_column_range_accepted():
    validate_line_total(Decimal("9999999999.99"))


def test_line_total_above_column_range_rejected():
    with pytest.raises(BadInputError) as exc_info:
        validate_line_total(Decimal("10000000000.00"))
    assert exc_info.value.message == "Line total must not exceed 9999999999.99"
