"""CORS Allow-List — only the configured front end may call cross-origin."""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from product_api.api.cors import configure_cors
from product_api.config import get_settings

FRONT_END = "http://front.test"


def _make_app(allowed_origin: str | None) -> FastAPI:
    app = FastAPI()

    @app.get("/ping")
    async def ping():
        return {"pong": True}

    configure_cors(app, allowed_origin)
    return app


async def _get(app: FastAPI, **kwargs):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        return await c.get("/ping", **kwargs)


async def test_allowed_origin_gets_cors_headers():
    res = await _get(_make_app(FRONT_END), headers={"Origin": FRONT_END})
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == FRONT_END


async def test_foreign_origin_is_rejected_before_route():
    res = await _get(_make_app(FRONT_END), headers={"Origin": "http://evil.test"})
    assert res.status_code == 403
    assert res.json() == {"error": "Error de cors"}


async def test_request_without_origin_passes():
    res = await _get(_make_app(FRONT_END))
    assert res.status_code == 200
    assert res.json() == {"pong": True}


async def test_unconfigured_origin_rejects_every_cross_origin_call():
    res = await _get(_make_app(None), headers={"Origin": FRONT_END})
    assert res.status_code == 403


async def test_foreign_preflight_is_rejected():
    app = _make_app(FRONT_END)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.options(
            "/ping",
            headers={
                "Origin": "http://evil.test",
                "Access-Control-Request-Method": "GET",
            },
        )
    assert res.status_code == 403


async def test_allowed_preflight_succeeds():
    app = _make_app(FRONT_END)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.options(
            "/ping",
            headers={
                "Origin": FRONT_END,
                "Access-Control-Request-Method": "POST",
            },
        )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == FRONT_END


async def test_main_app_uses_front_end_url_setting(client):
    origin = get_settings().front_end_url
    res = await client.get("/api/products", headers={"Origin": origin})
    assert res.status_code == 200

    res = await client.get("/api/products", headers={"Origin": "http://evil.test"})
    assert res.status_code == 403
