"""Product Handlers — list, get, create, update, delete.

Invariants:
    - Validation order: fields (core) -> existence (update/delete) -> slug uniqueness
    - Update's uniqueness check excludes the product's own id
    - Changing a price never touches existing order lines (totals are snapshots)
    - Deleting a product used by an order line is a ConflictError
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ResourceType
from app.core.errors import ConflictError, ResourceNotFoundError
from app.core.repository_protocols import ProductRepository
from app.core.validate_product import validate_product_fields
from app.infrastructure.database import commit_or_conflict
from app.infrastructure.repositories import ProductStore
from app.models.product import Product
from app.schemas.product import (
    ProductInput, ProductListResponse, ProductResponse,
)

logger = logging.getLogger(__name__)

SLUG_IN_USE = "Slug already in use"
PRODUCT_NOT_FOUND = "Product not found"
PRODUCT_REFERENCED = "Product is referenced by existing orders"


class ProductHandlers:
    """Product CRUD handlers over one unit of work."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.products: ProductRepository = ProductStore(db)

    async def list_products(self) -> ProductListResponse:
        products = await self.products.list_all()
        return ProductListResponse(
            products=[ProductResponse.model_validate(p) for p in products],
        )

    async def get_product(self, product_id: UUID) -> ProductResponse:
        product = await self.products.get(product_id)
        if product is None:
            raise _not_found(product_id)
        return ProductResponse.model_validate(product)

    async def create_product(self, body: ProductInput) -> ProductResponse:
        _validate(body)
        if await self.products.slug_in_use(body.slug):
            raise ConflictError(SLUG_IN_USE)

        product = Product(
            title=body.title,
            description=body.description,
            slug=body.slug,
            price=body.price,
        )
        self.products.add(product)
        await commit_or_conflict(self.db, SLUG_IN_USE)

        logger.info("Product created", extra={"product_id": str(product.id)})
        return ProductResponse.model_validate(product)

    async def update_product(
        self, product_id: UUID, body: ProductInput,
    ) -> ProductResponse:
        _validate(body)
        product = await self.products.load_for_update(product_id)
        if product is None:
            raise _not_found(product_id)
        if await self.products.slug_in_use(body.slug, exclude_id=product_id):
            raise ConflictError(SLUG_IN_USE)

        product.title = body.title
        product.description = body.description
        product.slug = body.slug
        product.price = body.price
        await commit_or_conflict(self.db, SLUG_IN_USE)

        logger.info("Product updated", extra={"product_id": str(product_id)})
        return ProductResponse.model_validate(product)

    async def delete_product(self, product_id: UUID) -> None:
        product = await self.products.load_for_update(product_id)
        if product is None:
            raise _not_found(product_id)
        await self.products.delete(product)
        await commit_or_conflict(self.db, PRODUCT_REFERENCED)
        logger.info("Product deleted", extra={"product_id": str(product_id)})


def _validate(body: ProductInput) -> None:
    validate_product_fields(
        title=body.title,
        description=body.description,
        slug=body.slug,
        price=body.price,
    )


def _not_found(product_id: UUID) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        PRODUCT_NOT_FOUND, ResourceType.PRODUCT.value, str(product_id),
    )
