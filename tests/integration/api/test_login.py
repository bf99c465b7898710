import pytest
from httpx import AsyncClient

from feedback_service.api.utils.jwt import verify_jwt


@pytest.mark.asyncio
async def test_login_returns_bearer_token(client: AsyncClient):
    register = await client.post("/api/register", json={"email": "a@x.com", "password": "secret1"})
    user_id = register.json()["user"]["id"]

    response = await client.post("/api/login", json={"email": "a@x.com", "password": "secret1"})

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    assert data["token_type"] == "bearer"
    assert data["user"]["id"] == user_id

    claims = verify_jwt(data["access_token"])
    assert claims["sub"] == user_id
    assert claims["email"] == "a@x.com"
    assert claims["role"] == "USER"
    assert claims["exp"] - claims["iat"] == 12 * 60 * 60


@pytest.mark.asyncio
async def test_wrong_password_and_unknown_email_look_the_same(client: AsyncClient):
    await client.post("/api/register", json={"email": "a@x.com", "password": "secret1"})

    wrong_password = await client.post("/api/login", json={"email": "a@x.com", "password": "nope123"})
    unknown_email = await client.post("/api/login", json={"email": "b@x.com", "password": "secret1"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["error"]["code"] == "INVALID_CREDENTIALS"
