import pytest
from httpx import AsyncClient

from tests.fixtures.users import auth_header, register_and_login


@pytest.mark.asyncio
async def test_me_returns_profile(client: AsyncClient):
    user_id, token = await register_and_login(client, "a@x.com")

    response = await client.get("/api/me", headers=auth_header(token))

    assert response.status_code == 200
    assert response.json() == {"id": user_id, "name": None, "email": "a@x.com", "role": "USER"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": "Bearer"},
        {"Authorization": "Bearer "},
        {"Authorization": "Token abc"},
        {"Authorization": "Bearer not.a.jwt"},
    ],
)
async def test_me_requires_valid_token(client: AsyncClient, headers):
    response = await client.get("/api/me", headers=headers)

    assert response.status_code == 401
    assert response.json()["error"] == {"code": "UNAUTHORIZED", "message": "Invalid or expired token"}


@pytest.mark.asyncio
async def test_health_needs_no_token(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
