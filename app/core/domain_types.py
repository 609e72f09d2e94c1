"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CustomerId, ProductId, OrderId, OrderLineId wrap UUIDs
    - Money is a Decimal in Python and a JSON number on the wire
    - EMPTY_ID (all-zero UUID) is never a valid reference

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Decimal over float for money: line totals are exact products, sums exact too
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated, NewType
from uuid import UUID

from pydantic import PlainSerializer


# ─── Identity Types ──────────────────────────────────────────────

CustomerId = NewType("CustomerId", UUID)
ProductId = NewType("ProductId", UUID)
OrderId = NewType("OrderId", UUID)
OrderLineId = NewType("OrderLineId", UUID)

EMPTY_ID = UUID(int=0)


# ─── Value Types ─────────────────────────────────────────────────

# Pydantic v2 dumps Decimal as a string in JSON mode; clients expect numbers.
Money = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]

# Stored as Numeric(12, 2): at most 10 integer digits, exactly 2 decimals.
CENT = Decimal("0.01")
MAX_MONEY = Decimal("9999999999.99")

# Stored as a 32-bit INTEGER column.
MAX_QUANTITY = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class ResourceType(str, Enum):
    """Resource names used in not-found errors and log records."""
    CUSTOMER = "customer"
    PRODUCT = "product"
    ORDER = "order"
