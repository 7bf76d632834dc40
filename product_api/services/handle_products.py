"""Product Handlers — one coroutine per CRUD operation.

Invariants:
    - Every handler runs only after input_error_gate let the request through;
      none re-validates its input
    - A missing product answers 404 {"error": "Producto no encontrado"}
    - At most one read and one write per handler, in that order
    - Persistence errors are not caught here; they reach the global handlers

Design Decisions:
    - Persistence arrives as a ProductRepository argument, never a global
      session, so handlers run unchanged against test doubles
    - PATCH negates availability unconditionally (no request field is read)
"""

import logging

from fastapi import Response, status
from fastapi.responses import JSONResponse

from product_api.api.pipeline import RequestContext
from product_api.core.repository_protocols import ProductRepository
from product_api.core.validation import stringify, to_boolean, to_number
from product_api.schemas.product import serialize_product

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Producto no encontrado"
PRODUCT_DELETED = "Producto eliminado"


def _not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": PRODUCT_NOT_FOUND},
    )


def _product_id(ctx: RequestContext) -> int:
    return int(ctx.params["id"])


async def get_products(
    ctx: RequestContext, products: ProductRepository,
) -> Response:
    """List all products, cheapest first."""
    records = await products.list_by_price()
    return JSONResponse(
        content={"data": [serialize_product(p) for p in records]},
    )


async def get_product_by_id(
    ctx: RequestContext, products: ProductRepository,
) -> Response:
    product = await products.get(_product_id(ctx))
    if product is None:
        return _not_found()
    return JSONResponse(content={"data": serialize_product(product)})


async def create_product(
    ctx: RequestContext, products: ProductRepository,
) -> Response:
    """Persist a new product; availability starts as True."""
    product = await products.create(
        name=stringify(ctx.body["name"]),
        price=to_number(ctx.body["price"]),
    )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"data": serialize_product(product)},
    )


async def update_product(
    ctx: RequestContext, products: ProductRepository,
) -> Response:
    """Overwrite name, price and availability of an existing product."""
    product = await products.get(_product_id(ctx))
    if product is None:
        return _not_found()
    product.name = stringify(ctx.body["name"])
    product.price = to_number(ctx.body["price"])
    product.availability = to_boolean(ctx.body["availability"])
    product = await products.save(product)
    logger.info("Product updated", extra={"product_id": product.id})
    return JSONResponse(content={"data": serialize_product(product)})


async def update_availability(
    ctx: RequestContext, products: ProductRepository,
) -> Response:
    """Flip availability to its negation."""
    product = await products.get(_product_id(ctx))
    if product is None:
        return _not_found()
    product.availability = not product.availability
    product = await products.save(product)
    logger.info(
        f"Product availability set to {product.availability}",
        extra={"product_id": product.id},
    )
    return JSONResponse(content={"data": serialize_product(product)})


async def delete_product(
    ctx: RequestContext, products: ProductRepository,
) -> Response:
    product = await products.get(_product_id(ctx))
    if product is None:
        return _not_found()
    await products.delete(product)
    return JSONResponse(content={"data": PRODUCT_DELETED})
