"""Integration test fixtures.

Each test gets a fresh application started through its lifespan, backed by
an in-memory SQLite database, with the ingredients catalog faked by respx.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import orjson
import pytest
import respx
from httpx import ASGITransport, AsyncClient

from recipes_api.factory import create_app
from tests.factories.catalog import catalog_record
from tests.factories.settings import CATALOG_URL


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator

    from fastapi import FastAPI

    from recipes_api.core.config import Settings


pytestmark = pytest.mark.integration

# What the fake catalog knows: id -> (name, cost)
CATALOG_ITEMS: dict[str, tuple[str, str]] = {
    "flour": ("Plain Flour", "1.20"),
    "milk": ("Whole Milk", "0.90"),
    "eggs": ("Free Range Eggs", "2.40"),
    "butter": ("Butter", "1.75"),
}


def _batch_get(request: httpx.Request) -> httpx.Response:
    ids = orjson.loads(request.content)["ids"]
    records = [
        catalog_record(i, CATALOG_ITEMS[i][1], CATALOG_ITEMS[i][0])
        for i in ids
        if i in CATALOG_ITEMS
    ]
    return httpx.Response(200, json=records)


@pytest.fixture
def catalog() -> Generator[respx.MockRouter]:
    """Fake the ingredients catalog for the duration of a test."""
    with respx.mock(base_url=CATALOG_URL, assert_all_called=False) as router:
        router.post("/ingredients/batch-get", name="batch_get").mock(
            side_effect=_batch_get
        )
        yield router


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create FastAPI app with test settings."""
    return create_app(test_settings)


@pytest.fixture
async def started_app(app: FastAPI) -> AsyncGenerator[FastAPI]:
    """Run the application lifespan around the test.

    ASGITransport does not send lifespan events, so startup and shutdown
    are driven here.
    """
    async with app.router.lifespan_context(app):
        yield app


@pytest.fixture
async def client(
    started_app: FastAPI,
    catalog: respx.MockRouter,
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client acting as user 'alice'."""
    async with AsyncClient(
        transport=ASGITransport(app=started_app),
        base_url="http://test",
        headers={"X-User-ID": "alice"},
    ) as ac:
        yield ac
