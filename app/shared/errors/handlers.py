"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.persons.errors import (
    InvalidColorError,
    InvalidImportFileError,
    NoPersonsWithColorError,
    PersonAlreadyExistsError,
    PersonDomainError,
    PersonNotFoundError,
    PersonValidationError,
)
from app.shared.security.rate_limiting import rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500


def _error_response(
    status_code: int,
    error: str,
    detail: str | None = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def _field_locations(exc: RequestValidationError) -> list[str]:
    return [".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()]


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(PersonNotFoundError)
    async def handle_person_not_found(
        _request: Request, exc: PersonNotFoundError
    ) -> JSONResponse:
        """Handle lookups of an unknown person id."""
        logger.warning("Person not found: %s", exc.person_id)
        return _error_response(HTTP_404, "Person not found")

    @app.exception_handler(NoPersonsWithColorError)
    async def handle_no_persons_with_color(
        _request: Request, exc: NoPersonsWithColorError
    ) -> JSONResponse:
        """Handle color lookups without any match."""
        logger.warning("No persons with color: %s", exc.color)
        return _error_response(HTTP_404, "No persons found", f"color: {exc.color}")

    @app.exception_handler(PersonAlreadyExistsError)
    async def handle_person_already_exists(
        _request: Request, exc: PersonAlreadyExistsError
    ) -> JSONResponse:
        """Handle creation of a duplicate person."""
        logger.warning("Duplicate person rejected")
        return _error_response(HTTP_409, "Person already exists")

    @app.exception_handler(InvalidColorError)
    async def handle_invalid_color(
        _request: Request, exc: InvalidColorError
    ) -> JSONResponse:
        """Handle unrecognised color tokens."""
        logger.warning("Invalid color: %r", exc.token)
        return _error_response(HTTP_400, "Invalid color", exc.message)

    @app.exception_handler(InvalidImportFileError)
    async def handle_invalid_import_file(
        _request: Request, exc: InvalidImportFileError
    ) -> JSONResponse:
        """Handle unreadable import uploads."""
        logger.warning("Invalid import file: %s", exc.reason)
        return _error_response(HTTP_400, "Invalid import file", exc.reason)

    @app.exception_handler(PersonValidationError)
    async def handle_person_validation(
        _request: Request, exc: PersonValidationError
    ) -> JSONResponse:
        """Handle remaining invalid person input."""
        logger.warning("Invalid person input: %s", exc.message)
        return _error_response(HTTP_400, "Invalid request", exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies, files and parameters."""
        fields = _field_locations(exc)
        logger.warning("Request validation failed: %s", fields)
        return _error_response(
            HTTP_400, "Invalid request", "invalid fields: " + ", ".join(fields)
        )

    @app.exception_handler(PersonDomainError)
    async def handle_person_domain(
        _request: Request, exc: PersonDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled persons domain errors."""
        logger.error("Unhandled persons domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle framework errors such as unknown routes and wrong methods."""
        return _error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
