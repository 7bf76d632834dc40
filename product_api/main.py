"""Products API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProductApiError → structured JSON responses
    - CORS allow-list configured from settings (not hardcoded)
    - Database initialized on startup via lifespan; a failed handshake is
      logged and the API keeps serving
    - Swagger UI served at /docs, OpenAPI JSON at /openapi.json

Usage:
    uvicorn product_api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from product_api.api import openapi
from product_api.api.cors import configure_cors
from product_api.api.error_handlers import register_error_handlers
from product_api.api.routes import health, products
from product_api.config import get_settings
from product_api.infrastructure import database
from product_api.infrastructure.observability import (
    RequestLoggingMiddleware,
    setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await database.connect_db(manager)
    logger.info("Products API started")
    yield
    logger.info("Products API shutting down")
    await manager.dispose()


app = FastAPI(
    title=openapi.API_TITLE,
    version=openapi.API_VERSION,
    description=openapi.API_DESCRIPTION,
    openapi_tags=openapi.OPENAPI_TAGS,
    swagger_ui_parameters=openapi.SWAGGER_UI_PARAMETERS,
    docs_url="/docs",
    redoc_url=None,
    lifespan=lifespan,
)

settings = get_settings()
configure_cors(app, settings.front_end_url)
app.add_middleware(RequestLoggingMiddleware)

# Routes: explicit registration
app.include_router(products.router)
app.include_router(health.router)

register_error_handlers(app)
