"""Error Handlers — global exception handlers for the Products API.

Invariants:
    - ProductApiError → its http_status with {"error": message}
    - HTTPException (unknown route, wrong method) → {"error": detail}
    - Exception (catch-all) → 500, never leaks internal details
    - Every error body is JSON
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_api.core.errors import ProductApiError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_product_api_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_product_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ProductApiError)
    async def product_api_error_handler(request: Request, exc: ProductApiError):
        """Handle all domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"ProductApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
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
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
