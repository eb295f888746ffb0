"""Middleware tests — request ID, CORS, error handling."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_request_id_generated(client: AsyncClient) -> None:
    """Request ID is auto-generated when not provided."""
    response = await client.get("/health")
    assert "x-request-id" in response.headers
    assert len(response.headers["x-request-id"]) == 36  # UUID format


@pytest.mark.asyncio
async def test_request_id_preserved(client: AsyncClient) -> None:
    """Custom request ID is echoed back in response."""
    response = await client.get("/health", headers={"X-Request-Id": "test-abc-123"})
    assert response.headers["x-request-id"] == "test-abc-123"


@pytest.mark.asyncio
async def test_request_id_on_errors(client: AsyncClient) -> None:
    response = await client.get("/api/goals")
    assert response.status_code == 401
    assert "x-request-id" in response.headers


@pytest.mark.asyncio
async def test_cors_preflight(client: AsyncClient) -> None:
    """CORS preflight returns access-control-allow-origin for configured origin."""
    response = await client.options(
        "/api/activities",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


@pytest.mark.asyncio
async def test_unknown_route_is_json_404(client: AsyncClient) -> None:
    response = await client.get("/api/friends")
    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint not found", "path": "/api/friends", "method": "GET"}


@pytest.mark.asyncio
async def test_no_update_or_delete_routes(client: AsyncClient, alice: dict) -> None:
    """Activities, goals and messages are append-only."""
    for path in ("/api/activities", "/api/goals", "/api/messages"):
        response = await client.delete(path, headers=alice["headers"])
        assert response.status_code == 405
        assert "error" in response.json()


@pytest.mark.asyncio
async def test_malformed_json_body(client: AsyncClient) -> None:
    response = await client.post(
        "/api/auth/signup",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request"
