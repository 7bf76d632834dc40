"""CORS Allow-List — a single configured origin may call the API.

Invariants:
    - Requests whose Origin header differs from FRONT_END_URL are rejected
      with 403 {"error": "Error de cors"} before reaching any route
    - Requests without an Origin header are not cross-origin and pass through
    - Allowed origins get the standard CORS response headers from Starlette's
      CORSMiddleware
"""

import logging
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from product_api.core.errors import CorsOriginError

logger = logging.getLogger(__name__)


class OriginAllowListMiddleware(BaseHTTPMiddleware):
    """Reject cross-origin callers that are not the configured front end."""

    def __init__(self, app, allowed_origin: str | None):
        super().__init__(app)
        self.allowed_origin = allowed_origin

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        origin = request.headers.get("origin")
        if origin is None or origin == self.allowed_origin:
            return await call_next(request)
        exc = CorsOriginError(origin)
        logger.warning(
            f"Rejected cross-origin request from {origin}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def configure_cors(app: FastAPI, allowed_origin: str | None) -> None:
    """Install CORS headers + allow-list rejection for one origin.

    The allow-list middleware is added last so it runs first and rejects
    foreign origins (preflights included) before CORSMiddleware sees them.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[allowed_origin] if allowed_origin else [],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(OriginAllowListMiddleware, allowed_origin=allowed_origin)
