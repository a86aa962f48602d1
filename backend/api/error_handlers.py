"""
Global exception handlers.

Domain errors (GatehouseError) map to one HTTP status per base class and
carry their own message; anything else is a 500 that never leaks
internal details.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    GatehouseError,
    NotFoundError,
    PartialFailureError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; first isinstance match wins
STATUS_BY_ERROR: list[tuple[type[GatehouseError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ExternalServiceError, status.HTTP_502_BAD_GATEWAY),
    (PartialFailureError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: GatehouseError) -> int:
    """HTTP status for a domain error."""
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_gatehouse_error_handler(app)
    _register_generic_error_handler(app)


def _register_gatehouse_error_handler(app: FastAPI) -> None:

    @app.exception_handler(GatehouseError)
    async def gatehouse_error_handler(request: Request, exc: GatehouseError):
        """Handle all domain errors."""
        status_code = status_for(exc)
        log = logger.error if status_code >= 500 else logger.info
        log(
            f"{exc.__class__.__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        headers = None
        if status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=status_code,
            content=exc.to_dict(),
            headers=headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all that never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "details": {},
            },
        )
