"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from articles_api.main import app


@pytest.mark.asyncio
async def test_health_check_returns_200():
    """Health endpoint should return 200 with status, version, and environment."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert "environment" in data


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client):
    response = await client.get("/nope")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


@pytest.mark.asyncio
async def test_api_docs_are_served(client):
    response = await client.get("/api-docs")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]


@pytest.mark.asyncio
async def test_unsupported_method_uses_error_envelope(client):
    response = await client.patch("/articles/1", json={"title": "x"})
    assert response.status_code == 405
    assert response.json() == {"message": "Method Not Allowed"}
