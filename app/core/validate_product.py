"""Product Validation — pure field checks for create and update.

Invariants:
    - Order: title, description, slug presence, then price > 0, then price
      fits the stored column (at most MAX_MONEY, at most two decimal places)
    - A missing price is treated as zero (same message)
    - An accepted price is stored exactly: what create returns, get returns
"""

from decimal import Decimal

from app.core.domain_types import CENT, MAX_MONEY
from app.core.errors import BadInputError
from app.core.validate_customer import is_blank


def validate_product_fields(
    *,
    title: str | None,
    description: str | None,
    slug: str | None,
    price: Decimal | None,
) -> None:
    """Raise BadInputError for the first invalid product field."""
    if is_blank(title):
        raise BadInputError("Title is required", "title")
    if is_blank(description):
        raise BadInputError("Description is required", "description")
    if is_blank(slug):
        raise BadInputError("Slug is required", "slug")
    if price is None or price <= 0:
        raise BadInputError("Price must be greater than zero", "price")
    if price > MAX_MONEY:
        raise BadInputError(f"Price must not exceed {MAX_MONEY}", "price")
    if price.quantize(CENT) != price:
        raise BadInputError("Price must have at most two decimal places", "price")
