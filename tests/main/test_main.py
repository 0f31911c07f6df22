# tests/main/test_main.py
"""Tests for application wiring: root route, middleware and exception handlers."""

import pytest
from fastapi import APIRouter
from httpx import AsyncClient

from cms.errors import ImageTooLargeError, RecordNotFoundError
from cms.main import app

probe = APIRouter(prefix="/_probe")


@probe.get("/not-found")
async def raise_not_found() -> None:
    raise RecordNotFoundError("Thing not found")


@probe.get("/too-large")
async def raise_too_large() -> None:
    raise ImageTooLargeError(max_size_mb=5, actual_size_mb=9.0)


app.include_router(probe)


class TestRoot:
    @pytest.mark.asyncio
    async def test_welcome(self, client: AsyncClient) -> None:
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json() == {"message": "Welcome to CMS Backend"}

    @pytest.mark.asyncio
    async def test_openapi_lists_api_routes(self, client: AsyncClient) -> None:
        paths = (await client.get("/openapi.json")).json()["paths"]

        assert "/api/categories" in paths
        assert "/api/posts/{record_id}/comments" in paths
        assert "/api/comments/{comment_id}/like" in paths
        assert "/api/media/upload" in paths


class TestMiddleware:
    @pytest.mark.asyncio
    async def test_security_headers(self, client: AsyncClient) -> None:
        response = await client.get("/")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, client: AsyncClient) -> None:
        response = await client.get("/")
        assert response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, client: AsyncClient) -> None:
        response = await client.get("/", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"


class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_database_error_envelope(self, client: AsyncClient) -> None:
        response = await client.get("/_probe/not-found")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Thing not found", "data": None}

    @pytest.mark.asyncio
    async def test_upload_error_envelope(self, client: AsyncClient) -> None:
        response = await client.get("/_probe/too-large")

        body = response.json()
        assert response.status_code == 413
        assert body["success"] is False
        assert body["max_size_mb"] == 5

    @pytest.mark.asyncio
    async def test_unknown_route(self, client: AsyncClient) -> None:
        response = await client.get("/api/unknown")
        assert response.status_code == 404
