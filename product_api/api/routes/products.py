"""Product Routes — static route table: (method, path) → rules + gate + handler.

Invariants:
    - Every route runs [validation_stage(rules), input_error_gate, handler]
    - Rules are declared per route, in the order their failures are reported
    - First declared match wins; no dynamic routing
    - Handlers receive the ProductRepository via FastAPI dependency injection
"""

from dataclasses import dataclass, field
from functools import partial
from typing import Awaitable, Callable

from fastapi import APIRouter, Depends, Request, Response

from product_api.api import openapi
from product_api.api.pipeline import (
    RequestContext,
    build_context,
    input_error_gate,
    run_pipeline,
    validation_stage,
)
from product_api.core.repository_protocols import ProductRepository
from product_api.core.validation import Check, FieldRule, Location
from product_api.infrastructure.product_repository import get_product_repository
from product_api.schemas.product import ProductCreate, ProductUpdate
from product_api.services import handle_products


Handler = Callable[[RequestContext, ProductRepository], Awaitable[Response]]


# ─── Rules ───────────────────────────────────────────────────────

ID_RULES = (
    FieldRule(Location.PARAMS, "id", Check.IS_INT, "ID no valido"),
)

PRODUCT_BODY_RULES = (
    FieldRule(
        Location.BODY, "name", Check.NOT_EMPTY,
        "El nombre del producto no puede ir vacio",
    ),
    FieldRule(Location.BODY, "price", Check.IS_NUMERIC, "Valor no valido"),
    FieldRule(
        Location.BODY, "price", Check.NOT_EMPTY,
        "El precio del producto no puede ir vacio",
    ),
    FieldRule(Location.BODY, "price", Check.POSITIVE, "El precio no es valido"),
)

AVAILABILITY_RULES = (
    FieldRule(
        Location.BODY, "availability", Check.IS_BOOLEAN,
        "Valor para disponibilidad no valido",
    ),
)


# ─── Route table ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Route:
    method: str
    path: str
    handler: Handler
    rules: tuple[FieldRule, ...] = ()
    status_code: int = 200
    summary: str = ""
    description: str = ""
    responses: dict = field(default_factory=dict)
    openapi_extra: dict | None = None


ROUTES: tuple[Route, ...] = (
    Route(
        "GET", "", handle_products.get_products,
        summary="Get a list of products",
        description="Return a list of products",
        responses=openapi.LIST_RESPONSES,
    ),
    Route(
        "GET", "/{id}", handle_products.get_product_by_id,
        rules=ID_RULES,
        summary="Get a product by ID",
        description="Return a product based on its unique ID",
        responses=openapi.PRODUCT_RESPONSES,
        openapi_extra={
            "parameters": [openapi.id_parameter("The ID of the product to retrieve")],
        },
    ),
    Route(
        "POST", "", handle_products.create_product,
        rules=PRODUCT_BODY_RULES,
        status_code=201,
        summary="Create a new product",
        description="Returns a new record in the database",
        responses=openapi.CREATE_RESPONSES,
        openapi_extra={"requestBody": openapi.json_request_body(ProductCreate)},
    ),
    Route(
        "PUT", "/{id}", handle_products.update_product,
        rules=ID_RULES + PRODUCT_BODY_RULES + AVAILABILITY_RULES,
        summary="Updates a product with user input",
        description="Returns the updated product",
        responses=openapi.UPDATE_RESPONSES,
        openapi_extra={
            "parameters": [openapi.id_parameter("The ID of the product to update")],
            "requestBody": openapi.json_request_body(ProductUpdate),
        },
    ),
    Route(
        "PATCH", "/{id}", handle_products.update_availability,
        rules=ID_RULES,
        summary="Update Product availability",
        description="Returns the updated availability",
        responses=openapi.PRODUCT_RESPONSES,
        openapi_extra={
            "parameters": [openapi.id_parameter("The ID of the product to update")],
        },
    ),
    Route(
        "DELETE", "/{id}", handle_products.delete_product,
        rules=ID_RULES,
        summary="Delete a product by ID",
        description="Returns a message of delete product",
        responses=openapi.DELETE_RESPONSES,
        openapi_extra={
            "parameters": [openapi.id_parameter("The ID of the product to delete")],
        },
    ),
)


def _make_endpoint(route: Route):
    """FastAPI endpoint running the route's pipeline."""

    async def endpoint(
        request: Request,
        products: ProductRepository = Depends(get_product_repository),
    ) -> Response:
        ctx = await build_context(request)
        stages = [
            validation_stage(route.rules),
            input_error_gate,
            partial(route.handler, products=products),
        ]
        return await run_pipeline(ctx, stages)

    endpoint.__name__ = route.handler.__name__
    return endpoint


def build_router(routes: tuple[Route, ...] = ROUTES) -> APIRouter:
    """Register the route table under /api/products."""
    api_router = APIRouter(prefix="/api/products", tags=["Products"])
    for route in routes:
        api_router.add_api_route(
            route.path,
            _make_endpoint(route),
            methods=[route.method],
            status_code=route.status_code,
            summary=route.summary or None,
            description=route.description,
            responses=route.responses,
            openapi_extra=route.openapi_extra,
            name=route.handler.__name__,
        )
    return api_router


router = build_router()
