"""Order Routes — /v1/orders create and get-by-id.

Invariants:
    - No PUT/DELETE: orders are immutable once created
    - POST answers 201 + order detail with a Location header
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.schemas.order import OrderCreate, OrderDetailResponse
from app.services.handle_orders import OrderHandlers

router = APIRouter(prefix="/v1/orders", tags=["orders"])


def get_handlers(db: AsyncSession = Depends(get_db)) -> OrderHandlers:
    return OrderHandlers(db)


@router.get("/{order_id}", response_model=OrderDetailResponse)
async def get_order(
    order_id: UUID, handlers: OrderHandlers = Depends(get_handlers),
):
    """Order with customer name, enriched lines and total amount."""
    return await handlers.get_order(order_id)


@router.post(
    "", response_model=OrderDetailResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    body: OrderCreate,
    response: Response,
    handlers: OrderHandlers = Depends(get_handlers),
):
    order = await handlers.create_order(body)
    response.headers["Location"] = f"{router.prefix}/{order.id}"
    return order
