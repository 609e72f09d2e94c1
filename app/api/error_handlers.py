"""Error Handlers — global exception handlers for the BugStore API.

Invariants:
    - BugStoreError → its http_status with {"error": "<message>"}
    - RequestValidationError (malformed JSON, wrong types, bad path ids) → 400
    - Exception (catch-all) → 500, never leaks internal details
    - Handlers in services/ never format HTTP responses; this module is the
      only place domain errors become status codes

Design Decisions:
    - Three-layer handler: domain (BugStoreError), validation (Pydantic), catch-all (Exception)
    - 4xx domain errors logged at WARNING, 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import BugStoreError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register BugStore domain/infrastructure error handler."""

    @app.exception_handler(BugStoreError)
    async def bugstore_error_handler(request: Request, exc: BugStoreError):
        """Handle all BugStore domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"BugStoreError: {exc.message}",
            extra={**exc.to_log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "BAD_INPUT", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the error body from the first validation failure."""
    errors = exc.errors()
    if not errors:
        return {"error": "Invalid request data"}
    first = errors[0]
    location = ".".join(str(loc) for loc in first["loc"])
    return {"error": f"Invalid request data: {location}: {first['msg']}"}
