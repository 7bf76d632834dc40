"""Structured Logging — JSON formatter, setup and per-request access log.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (product_id, error_code, method, path, status_code,
      duration_ms) surfaced when present
    - Every HTTP request produces exactly one access-log line, including
      requests that end in an unhandled exception

Design Decisions:
    - setup_logging called once on startup via lifespan
    - JSON format in production, human-readable in development
"""

import json
import logging
import time
from datetime import datetime, timezone
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

_EXTRA_KEYS = (
    "product_id", "error_code", "method", "path", "status_code", "duration_ms",
)

access_logger = logging.getLogger("product_api.access")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One access-log line per request: method, path, status, duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            access_logger.error(
                f"{request.method} {request.url.path} 500",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": 500,
                    "duration_ms": _elapsed_ms(start),
                },
            )
            raise
        duration_ms = _elapsed_ms(start)
        access_logger.info(
            f"{request.method} {request.url.path} {response.status_code} "
            f"{duration_ms} ms",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 3)
