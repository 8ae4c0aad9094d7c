from httpx import AsyncClient


async def test_health_endpoint_returns_service_metadata(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["service"]
    assert payload["status"] == "ok"
    assert payload["datastores"]["database"] == {"status": "ok"}
    assert payload["datastores"]["session_store"] == {"status": "ok", "backend": "memory"}


async def test_health_endpoint_needs_no_session(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")

    assert response.status_code == 200
