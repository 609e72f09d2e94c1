"""Customer Handlers — list, get, create, update, delete.

Invariants:
    - Validation order: fields (core) -> existence (update/delete) -> email uniqueness
    - Update's uniqueness check excludes the customer's own id
    - Every write commits through commit_or_conflict: a racing duplicate email
      or a delete blocked by existing orders surfaces as ConflictError
    - Handlers raise domain errors, never build HTTP responses

Design Decisions:
    - today injectable (defaults to UTC today): birth-date bound testable at the edge
    - Update/delete use load_for_update; list/get use read-only queries
"""

import logging
from collections.abc import Callable
from datetime import date
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ResourceType
from app.core.errors import ConflictError, ResourceNotFoundError
from app.core.repository_protocols import CustomerRepository
from app.core.validate_customer import utc_today, validate_customer_fields
from app.infrastructure.database import commit_or_conflict
from app.infrastructure.repositories import CustomerStore
from app.models.customer import Customer
from app.schemas.customer import (
    CustomerInput, CustomerListResponse, CustomerResponse,
)

logger = logging.getLogger(__name__)

EMAIL_IN_USE = "Email already in use"
CUSTOMER_NOT_FOUND = "Customer not found"
CUSTOMER_REFERENCED = "Customer is referenced by existing orders"


class CustomerHandlers:
    """Customer CRUD handlers over one unit of work."""

    def __init__(
        self, db: AsyncSession, today: Callable[[], date] = utc_today,
    ):
        self.db = db
        self.customers: CustomerRepository = CustomerStore(db)
        self._today = today

    async def list_customers(self) -> CustomerListResponse:
        customers = await self.customers.list_all()
        return CustomerListResponse(
            customers=[CustomerResponse.model_validate(c) for c in customers],
        )

    async def get_customer(self, customer_id: UUID) -> CustomerResponse:
        customer = await self.customers.get(customer_id)
        if customer is None:
            raise _not_found(customer_id)
        return CustomerResponse.model_validate(customer)

    async def create_customer(self, body: CustomerInput) -> CustomerResponse:
        self._validate(body)
        if await self.customers.email_in_use(body.email):
            raise ConflictError(EMAIL_IN_USE)

        customer = Customer(
            name=body.name,
            email=body.email,
            phone=body.phone,
            birth_date=body.birth_date,
        )
        self.customers.add(customer)
        await commit_or_conflict(self.db, EMAIL_IN_USE)

        logger.info(
            "Customer created", extra={"customer_id": str(customer.id)},
        )
        return CustomerResponse.model_validate(customer)

    async def update_customer(
        self, customer_id: UUID, body: CustomerInput,
    ) -> CustomerResponse:
        self._validate(body)
        customer = await self.customers.load_for_update(customer_id)
        if customer is None:
            raise _not_found(customer_id)
        if await self.customers.email_in_use(body.email, exclude_id=customer_id):
            raise ConflictError(EMAIL_IN_USE)

        customer.name = body.name
        customer.email = body.email
        customer.phone = body.phone
        customer.birth_date = body.birth_date
        await commit_or_conflict(self.db, EMAIL_IN_USE)

        logger.info(
            "Customer updated", extra={"customer_id": str(customer_id)},
        )
        return CustomerResponse.model_validate(customer)

    async def delete_customer(self, customer_id: UUID) -> None:
        customer = await self.customers.load_for_update(customer_id)
        if customer is None:
            raise _not_found(customer_id)
        await self.customers.delete(customer)
        await commit_or_conflict(self.db, CUSTOMER_REFERENCED)
        logger.info(
            "Customer deleted", extra={"customer_id": str(customer_id)},
        )

    def _validate(self, body: CustomerInput) -> None:
        validate_customer_fields(
            name=body.name,
            email=body.email,
            phone=body.phone,
            birth_date=body.birth_date,
            today=self._today(),
        )


def _not_found(customer_id: UUID) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        CUSTOMER_NOT_FOUND, ResourceType.CUSTOMER.value, str(customer_id),
    )
