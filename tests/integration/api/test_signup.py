import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.entities import User


@pytest.mark.asyncio
async def test_successful_signup(client: AsyncClient, db_session: AsyncSession):
    """Fresh email creates the account; response has no password hash"""
    response = await client.post("/auth/signup", json={
        "email": "a@x.com",
        "password": "pw1",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "success"
    assert body["data"]["email"] == "a@x.com"
    assert "id" in body["data"]
    assert "password_hash" not in body["data"]
    assert "password" not in body["data"]

    result = await db_session.exec(select(User).where(User.email == "a@x.com"))
    user = result.one()
    assert user.password_hash.startswith("$2b$12$")
    assert user.reset_token is None
    assert user.reset_token_expiration is None


@pytest.mark.asyncio
async def test_signup_existing_email(client: AsyncClient, db_session: AsyncSession):
    """signup(a@x.com, pw1) -> 200, signup(a@x.com, pw2) -> 422 CONFLICT"""
    first = await client.post("/auth/signup", json={"email": "a@x.com", "password": "pw1"})
    assert first.status_code == 200

    response = await client.post("/auth/signup", json={"email": "a@x.com", "password": "pw2"})

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "CONFLICT"
    assert body["statusCode"] == 422
    assert "message" in body

    result = await db_session.exec(select(User))
    assert len(result.all()) == 1


@pytest.mark.asyncio
async def test_signup_invalid_input(client: AsyncClient):
    """Validation failure carries field-level detail"""
    response = await client.post("/auth/signup", json={
        "email": "not-an-email",
        "password": "",
    })

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "VALIDATION_FAILED"
    assert body["statusCode"] == 422
    fields = {error["field"] for error in body["data"]}
    assert fields == {"email", "password"}
    assert body["message"] == body["data"][0]["message"]


@pytest.mark.asyncio
async def test_signup_password_longer_than_bcrypt_limit(client: AsyncClient):
    response = await client.post("/auth/signup", json={
        "email": "a@x.com",
        "password": "x" * 73,
    })

    assert response.status_code == 422
    assert response.json()["data"][0]["field"] == "password"
