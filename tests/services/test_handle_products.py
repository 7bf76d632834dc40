"""Product Handlers — tests against an in-memory ProductRepository.

Tests cover:
    - each handler's status code and envelope
    - 404 on missing ids for get/update/patch/delete
    - at most one read and one write per handler
    - body coercion on create and update
    - availability toggling on consecutive PATCHes
"""

import json

from product_api.services.handle_products import (
    PRODUCT_DELETED,
    PRODUCT_NOT_FOUND,
    create_product,
    delete_product,
    get_product_by_id,
    get_products,
    update_availability,
    update_product,
)


def _body(response) -> dict:
    return json.loads(response.body)


async def test_get_products_orders_by_price_ascending(products, make_ctx):
    products.add("Monitor", 300)
    products.add("Mouse", 50)
    products.add("Teclado", 120)

    response = await get_products(make_ctx(), products)

    assert response.status_code == 200
    assert [p["name"] for p in _body(response)["data"]] == [
        "Mouse", "Teclado", "Monitor",
    ]


async def test_get_products_returns_empty_list(products, make_ctx):
    response = await get_products(make_ctx(), products)
    assert _body(response) == {"data": []}


async def test_get_product_by_id_returns_product(products, make_ctx):
    record = products.add("Monitor", 300)

    response = await get_product_by_id(make_ctx({"id": str(record.id)}), products)

    assert response.status_code == 200
    data = _body(response)["data"]
    assert data["id"] == record.id
    assert data["name"] == "Monitor"
    assert data["availability"] is True
    assert "createdAt" in data and "updatedAt" in data


async def test_get_product_by_id_missing_is_404(products, make_ctx):
    response = await get_product_by_id(make_ctx({"id": "2000"}), products)
    assert response.status_code == 404
    assert _body(response) == {"error": PRODUCT_NOT_FOUND}


async def test_create_product_defaults_availability_and_coerces_price(products, make_ctx):
    response = await create_product(
        make_ctx(body={"name": "Mouse Testing", "price": "500"}), products,
    )

    assert response.status_code == 201
    data = _body(response)["data"]
    assert data["price"] == 500.0
    assert data["availability"] is True
    assert products.calls == ["create"]


async def test_update_product_overwrites_all_fields(products, make_ctx):
    record = products.add("Laptop", 900)

    response = await update_product(
        make_ctx(
            {"id": str(record.id)},
            {"name": "Laptop Actualizado", "price": 300, "availability": "false"},
        ),
        products,
    )

    assert response.status_code == 200
    data = _body(response)["data"]
    assert data["name"] == "Laptop Actualizado"
    assert data["price"] == 300
    assert data["availability"] is False
    assert products.calls == ["get", "save"]


async def test_update_product_missing_is_404_without_write(products, make_ctx):
    response = await update_product(
        make_ctx(
            {"id": "200"},
            {"name": "Laptop Actualizado", "price": 300, "availability": False},
        ),
        products,
    )
    assert response.status_code == 404
    assert _body(response)["error"] == PRODUCT_NOT_FOUND
    assert products.calls == ["get"]


async def test_update_availability_toggles_each_call(products, make_ctx):
    record = products.add("Monitor", 300)
    ctx = make_ctx({"id": str(record.id)})

    first = await update_availability(ctx, products)
    second = await update_availability(ctx, products)

    assert _body(first)["data"]["availability"] is False
    assert _body(second)["data"]["availability"] is True


async def test_update_availability_ignores_body(products, make_ctx):
    record = products.add("Monitor", 300, availability=True)

    response = await update_availability(
        make_ctx({"id": str(record.id)}, {"availability": True}), products,
    )

    assert _body(response)["data"]["availability"] is False


async def test_update_availability_missing_is_404(products, make_ctx):
    response = await update_availability(make_ctx({"id": "100"}), products)
    assert response.status_code == 404
    assert _body(response)["error"] == PRODUCT_NOT_FOUND


async def test_delete_product_removes_record(products, make_ctx):
    record = products.add("Monitor", 300)

    response = await delete_product(make_ctx({"id": str(record.id)}), products)

    assert response.status_code == 200
    assert _body(response) == {"data": PRODUCT_DELETED}
    assert record.id not in products.rows
    assert products.calls == ["get", "delete"]


async def test_delete_product_missing_is_404(products, make_ctx):
    response = await delete_product(make_ctx({"id": "200"}), products)
    assert response.status_code == 404
    assert _body(response)["error"] == PRODUCT_NOT_FOUND
    assert products.calls == ["get"]
