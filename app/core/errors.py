"""Error Hierarchy — typed, categorized exceptions for all BugStore failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Exactly three domain kinds surface to clients: bad input (400),
      not found (404), conflict (409)
    - to_response() produces the REST envelope {"error": "<message>"}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BugStoreError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Handlers raise, transport translates: handlers never build HTTP responses
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    field_name: str | None = None
    debug_info: dict[str, Any] | None = None


class BugStoreError(Exception):
    """Base exception for all BugStore errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}

    def to_log_extra(self) -> dict:
        """Fields attached to the log record for this error."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "resource_type": self.context.resource_type,
            "resource_id": self.context.resource_id,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class BadInputError(BugStoreError):
    """Malformed or missing input."""
    def __init__(
        self, message: str, field_name: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field_name = field_name
        super().__init__(
            message, "BAD_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.field_name = field_name


class ResourceNotFoundError(BugStoreError):
    """Referenced entity does not exist."""
    def __init__(
        self, message: str, resource_type: str,
        resource_id: str | None = None, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(BugStoreError):
    """Uniqueness or referential conflict with existing data."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BugStoreError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
