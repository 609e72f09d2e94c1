"""Product Routes — /v1/products CRUD endpoints (same shape as customers)."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.schemas.product import (
    ProductInput, ProductListResponse, ProductResponse,
)
from app.services.handle_products import ProductHandlers

router = APIRouter(prefix="/v1/products", tags=["products"])


def get_handlers(db: AsyncSession = Depends(get_db)) -> ProductHandlers:
    return ProductHandlers(db)


@router.get("", response_model=ProductListResponse)
async def list_products(handlers: ProductHandlers = Depends(get_handlers)):
    return await handlers.list_products()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: UUID, handlers: ProductHandlers = Depends(get_handlers),
):
    return await handlers.get_product(product_id)


@router.post(
    "", response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductInput,
    response: Response,
    handlers: ProductHandlers = Depends(get_handlers),
):
    product = await handlers.create_product(body)
    response.headers["Location"] = f"{router.prefix}/{product.id}"
    return product


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: UUID,
    body: ProductInput,
    handlers: ProductHandlers = Depends(get_handlers),
):
    return await handlers.update_product(product_id, body)


@router.delete(
    "/{product_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_product(
    product_id: UUID, handlers: ProductHandlers = Depends(get_handlers),
):
    await handlers.delete_product(product_id)
