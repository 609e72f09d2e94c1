"""Customer Routes — /v1/customers CRUD endpoints.

Invariants:
    - Routes only bind HTTP to CustomerHandlers; no validation or queries here
    - POST answers 201 with a Location header; DELETE answers 204 with no body
    - Domain errors propagate to the global error handlers
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.schemas.customer import (
    CustomerInput, CustomerListResponse, CustomerResponse,
)
from app.services.handle_customers import CustomerHandlers

router = APIRouter(prefix="/v1/customers", tags=["customers"])


def get_handlers(db: AsyncSession = Depends(get_db)) -> CustomerHandlers:
    return CustomerHandlers(db)


@router.get("", response_model=CustomerListResponse)
async def list_customers(handlers: CustomerHandlers = Depends(get_handlers)):
    """List every customer."""
    return await handlers.list_customers()


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: UUID, handlers: CustomerHandlers = Depends(get_handlers),
):
    return await handlers.get_customer(customer_id)


@router.post(
    "", response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    body: CustomerInput,
    response: Response,
    handlers: CustomerHandlers = Depends(get_handlers),
):
    customer = await handlers.create_customer(body)
    response.headers["Location"] = f"{router.prefix}/{customer.id}"
    return customer


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: UUID,
    body: CustomerInput,
    handlers: CustomerHandlers = Depends(get_handlers),
):
    return await handlers.update_customer(customer_id, body)


@router.delete(
    "/{customer_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_customer(
    customer_id: UUID, handlers: CustomerHandlers = Depends(get_handlers),
):
    await handlers.delete_customer(customer_id)
