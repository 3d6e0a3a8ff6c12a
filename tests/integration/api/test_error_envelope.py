from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.depends import get_unit_of_work


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_unexpected_error_is_internal(app):
    """Anything uncategorized becomes a 500 INTERNAL envelope"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.users.get_by_email = AsyncMock(side_effect=RuntimeError("database is gone"))

    async def broken_unit_of_work():
        yield uow

    app.dependency_overrides[get_unit_of_work] = broken_unit_of_work

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/auth/login", json={"email": "a@x.com", "password": "pw"})

    assert response.status_code == 500
    body = response.json()
    assert body == {
        "message": "Internal server error",
        "statusCode": 500,
        "code": "INTERNAL",
    }
    assert "database is gone" not in response.text
