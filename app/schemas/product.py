"""Product Schemas — create/update payload and response projection."""

from uuid import UUID

from app.core.domain_types import Money
from app.schemas.base import CamelModel


class ProductInput(CamelModel):
    """Body of POST /v1/products and PUT /v1/products/{id}."""
    title: str | None = None
    description: str | None = None
    slug: str | None = None
    price: Money | None = None


class ProductResponse(CamelModel):
    id: UUID
    title: str
    description: str
    slug: str
    price: Money


class ProductListResponse(CamelModel):
    products: list[ProductResponse]
