import pytest
from httpx import AsyncClient
from sqlmodel import select

from feedback_service.domain.entities import User


@pytest.mark.asyncio
async def test_register_creates_user(client: AsyncClient, db_session):
    """New accounts are USERs and the password is never stored in clear"""
    response = await client.post(
        "/api/register",
        json={"email": "a@x.com", "password": "secret1", "name": "Ann"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User registered successfully"
    assert data["user"]["email"] == "a@x.com"
    assert data["user"]["name"] == "Ann"
    assert data["user"]["role"] == "USER"
    assert "password" not in data["user"]
    assert "password_hash" not in data["user"]

    user = (await db_session.exec(select(User).where(User.email == "a@x.com"))).one()
    assert user.password_hash.startswith("$2")
    assert user.password_hash != "secret1"


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient):
    await client.post("/api/register", json={"email": "a@x.com", "password": "secret1"})

    response = await client.post("/api/register", json={"email": "a@x.com", "password": "other12"})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_register_short_password(client: AsyncClient):
    response = await client.post("/api/register", json={"email": "a@x.com", "password": "abc"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PASSWORD"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"password": "secret1"},
        {"email": "a@x.com"},
        {"email": "not-an-email", "password": "secret1"},
    ],
)
async def test_register_rejects_malformed_body(client: AsyncClient, payload):
    response = await client.post("/api/register", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BAD_REQUEST"


@pytest.mark.asyncio
async def test_email_is_stored_as_submitted(client: AsyncClient, db_session):
    """No case folding: the domain part keeps its capitals and lookups are exact"""
    response = await client.post(
        "/api/register", json={"email": "Ann@Example.COM", "password": "secret1"}
    )

    assert response.status_code == 201
    assert response.json()["user"]["email"] == "Ann@Example.COM"

    user = (await db_session.exec(select(User).where(User.email == "Ann@Example.COM"))).one()
    assert user.email == "Ann@Example.COM"

    exact = await client.post("/api/login", json={"email": "Ann@Example.COM", "password": "secret1"})
    folded = await client.post("/api/login", json={"email": "ann@example.com", "password": "secret1"})
    assert exact.status_code == 200
    assert folded.status_code == 401
