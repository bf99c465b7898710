import pytest
from httpx import AsyncClient

from tests.fixtures.users import reset_link_params


@pytest.mark.asyncio
async def test_register_login_and_reset_password(client: AsyncClient, notification_sink):
    """Full account lifecycle: register, log in, forget the password, reset it"""
    register = await client.post("/api/register", json={"email": "a@x.com", "password": "secret1"})
    assert register.status_code == 201

    login = await client.post("/api/login", json={"email": "a@x.com", "password": "secret1"})
    assert login.status_code == 200
    assert login.json()["access_token"]

    wrong = await client.post("/api/login", json={"email": "a@x.com", "password": "wrong"})
    assert wrong.status_code == 401

    forgot = await client.post("/api/forgot-password", json={"email": "a@x.com"})
    assert forgot.status_code == 200
    token, user_id = reset_link_params(notification_sink.messages[-1].body)

    reset = await client.post(
        "/api/reset-password",
        json={"user_id": user_id, "token": token, "new_password": "newpass1"},
    )
    assert reset.status_code == 200

    old = await client.post("/api/login", json={"email": "a@x.com", "password": "secret1"})
    assert old.status_code == 401

    new = await client.post("/api/login", json={"email": "a@x.com", "password": "newpass1"})
    assert new.status_code == 200
