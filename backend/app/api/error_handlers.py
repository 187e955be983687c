"""Error Handlers - global exception handlers for the user registry API.

Invariants:
    - UserRegistryError -> exc.http_status with {"error": exc.message}
    - RequestValidationError -> 400 with one collapsed description
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (UserRegistryError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py so tests can build a bare app with the same handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import UserRegistryError, ValidationError
from app.core.format_errors import describe_validation_errors

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register user registry domain/infrastructure error handler."""

    @app.exception_handler(UserRegistryError)
    async def domain_error_handler(request: Request, exc: UserRegistryError):
        """Handle all user registry errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"{exc.__class__.__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
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
        error = ValidationError(describe_validation_errors(exc.errors()))
        logger.warning(
            f"Validation error on {request.url.path}: {error.message}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal server error"},
        )
