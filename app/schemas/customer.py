"""Customer Schemas — create/update payload and response projection.

Invariants:
    - CustomerInput fields are all optional at the schema level: absence is
      reported by validate_customer_fields with its field-specific message
    - CustomerResponse mirrors the stored record, id included
"""

from datetime import date
from uuid import UUID

from app.schemas.base import CamelModel


class CustomerInput(CamelModel):
    """Body of POST /v1/customers and PUT /v1/customers/{id}."""
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    birth_date: date | None = None


class CustomerResponse(CamelModel):
    id: UUID
    name: str
    email: str
    phone: str
    birth_date: date


class CustomerListResponse(CamelModel):
    customers: list[CustomerResponse]
