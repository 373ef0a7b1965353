import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_endpoint(test_client: AsyncClient):
    response = await test_client.get("/health-check")

    assert response.status_code == 200
    assert response.json() == {"status": "Server is up and running"}
    assert "X-Process-Time" in response.headers


@pytest.mark.asyncio
async def test_unknown_route_returns_not_found(test_client: AsyncClient):
    response = await test_client.get("/nonExistentRoute")

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}
