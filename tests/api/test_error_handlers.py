"""Error Handlers — every failure leaves the API as the structured envelope.

Tests:
    - BookshelfError subclasses keep their own status and code
    - Unhandled exceptions become 500 INTERNAL_ERROR without internal details
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from bookshelf.api.error_handlers import register_error_handlers
from bookshelf.core.errors import InvalidInputError


@pytest.fixture
def failing_app():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/invalid")
    async def invalid():
        raise InvalidInputError("author cannot be empty or whitespace", "author")

    @app.get("/crash")
    async def crash():
        raise RuntimeError("secret internal detail")

    return app


async def test_domain_error_maps_to_its_status(failing_app):
    async with AsyncClient(
        transport=ASGITransport(app=failing_app), base_url="http://test",
    ) as c:
        res = await c.get("/invalid")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_INPUT"
    assert error["severity"] == "warning"
    assert error["context"]["field"] == "author"


async def test_unhandled_error_is_500_without_details(failing_app):
    async with AsyncClient(
        transport=ASGITransport(app=failing_app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/crash")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text
