"""
Exception handlers for FastAPI applications serving field-access models.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    FieldAccessError,
    PermissionDeniedError,
    create_error_response,
    get_http_status_code,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register field-access exception handlers on an application.

    PermissionDeniedError becomes a 403 whose ``error.details.violations``
    lists every rejected path; other library errors map through
    ``get_http_status_code``.

    Args:
        app: FastAPI application instance
    """
    @app.exception_handler(PermissionDeniedError)
    async def permission_denied_handler(request: Request, exc: PermissionDeniedError):
        """Handle rejected updates."""
        logger.info(f"Permission denied on {request.method} {request.url.path}: {exc.violations}")
        return JSONResponse(
            status_code=get_http_status_code(exc),
            content=create_error_response(exc),
        )

    @app.exception_handler(FieldAccessError)
    async def field_access_error_handler(request: Request, exc: FieldAccessError):
        """Handle other library errors."""
        status_code = get_http_status_code(exc)
        if status_code >= 500:
            logger.error(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=status_code,
            content=create_error_response(exc),
        )
