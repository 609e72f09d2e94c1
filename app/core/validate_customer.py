"""Customer Validation — pure field checks for create and update.

Invariants:
    - Checks run in declaration order and stop at the first failure:
      name, email, phone, birth date presence, birth date bound, email syntax
    - Birth date equal to today is accepted; strictly after today is rejected
    - No store access here: uniqueness is the handler's job (needs a lookup)

Design Decisions:
    - today injected by caller: keeps the function deterministic under test
    - email-validator with deliverability off: syntax only, never DNS
"""

from datetime import date, datetime, timezone

from email_validator import EmailNotValidError, validate_email

from app.core.errors import BadInputError


def utc_today() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_email(email: str) -> bool:
    """Syntactic email check (no DNS lookups)."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_customer_fields(
    *,
    name: str | None,
    email: str | None,
    phone: str | None,
    birth_date: date | None,
    today: date,
) -> None:
    """Raise BadInputError for the first invalid customer field."""
    if is_blank(name):
        raise BadInputError("Name is required", "name")
    if is_blank(email):
        raise BadInputError("Email is required", "email")
    if is_blank(phone):
        raise BadInputError("Phone is required", "phone")
    if birth_date is None:
        raise BadInputError("BirthDate is required", "birthDate")
    if birth_date > today:
        raise BadInputError("BirthDate cannot be in the future", "birthDate")
    if not is_valid_email(email):
        raise BadInputError("Email is invalid", "email")
