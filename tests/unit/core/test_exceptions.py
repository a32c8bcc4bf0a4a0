"""Unit tests for exception handlers and request middleware."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from recipes_api.core.exceptions import (
    FieldValidationError,
    NotFoundError,
    ServiceUnavailableError,
    UnauthorizedError,
    setup_exception_handlers,
)
from recipes_api.core.middleware import RequestIDMiddleware, TimingMiddleware
from recipes_api.core.middleware.request_id import MAX_REQUEST_ID_LENGTH
from recipes_api.validation import FieldError


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


pytestmark = pytest.mark.unit


def _build_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/invalid")
    async def invalid() -> None:
        raise FieldValidationError(
            [FieldError("name", "'name' must not be empty.")],
        )

    @app.get("/missing")
    async def missing() -> None:
        raise NotFoundError("Recipe", 9)

    @app.get("/forbidden")
    async def forbidden() -> None:
        raise UnauthorizedError("Only the owner can modify this recipe")

    @app.get("/unavailable")
    async def unavailable() -> None:
        raise ServiceUnavailableError("Catalog down", error="CATALOG_UNAVAILABLE")

    @app.get("/typed/{item_id}")
    async def typed(item_id: int) -> dict[str, int]:
        return {"id": item_id}

    @app.get("/boom")
    async def boom() -> None:
        msg = "connection string leaked"
        raise RuntimeError(msg)

    return app


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Create a client for the test application."""
    transport = ASGITransport(app=_build_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestExceptionHandlers:
    """Tests for the structured error responses."""

    async def test_field_validation_error(self, client: AsyncClient) -> None:
        """Should return 422 with one detail per field."""
        response = await client.get("/invalid")

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert body["details"] == [
            {
                "code": "VALIDATION_ERROR",
                "message": "'name' must not be empty.",
                "field": "name",
            }
        ]
        assert body["requestId"] == response.headers["X-Request-ID"]

    async def test_not_found(self, client: AsyncClient) -> None:
        """Should return 404 naming the resource."""
        response = await client.get("/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"
        assert "Recipe" in response.json()["message"]

    async def test_unauthorized_sets_challenge(self, client: AsyncClient) -> None:
        """Should return 401 with a WWW-Authenticate header."""
        response = await client.get("/forbidden")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    async def test_service_unavailable(self, client: AsyncClient) -> None:
        """Should return 503 with the given error code."""
        response = await client.get("/unavailable")

        assert response.status_code == 503
        assert response.json()["error"] == "CATALOG_UNAVAILABLE"

    async def test_request_shape_error(self, client: AsyncClient) -> None:
        """Should map FastAPI validation errors to the same shape."""
        response = await client.get("/typed/abc")

        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "path.item_id"

    async def test_unknown_route(self, client: AsyncClient) -> None:
        """Should wrap 404s for unknown routes."""
        response = await client.get("/nowhere")

        assert response.status_code == 404
        assert response.json()["error"] == "HTTP_ERROR"

    async def test_unexpected_error_hides_details(self, client: AsyncClient) -> None:
        """Should return a generic 500 without the exception text."""
        response = await client.get("/boom")

        assert response.status_code == 500
        assert response.json()["error"] == "INTERNAL_SERVER_ERROR"
        assert "leaked" not in response.text


class TestRequestMiddleware:
    """Tests for the request id and timing middleware."""

    async def test_generates_request_id(self, client: AsyncClient) -> None:
        """Should attach a fresh request id to the response."""
        response = await client.get("/typed/1")

        assert response.status_code == 200
        assert response.headers["X-Request-ID"]
        assert "X-Process-Time" in response.headers

    async def test_echoes_incoming_request_id(self, client: AsyncClient) -> None:
        """Should keep the caller's request id."""
        response = await client.get("/typed/1", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"

    async def test_replaces_oversized_request_id(self, client: AsyncClient) -> None:
        """Should not trust request ids longer than the limit."""
        oversized = "x" * (MAX_REQUEST_ID_LENGTH + 1)

        response = await client.get("/typed/1", headers={"X-Request-ID": oversized})

        assert response.headers["X-Request-ID"] != oversized
