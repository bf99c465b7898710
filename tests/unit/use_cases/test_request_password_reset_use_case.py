"""
Unit tests for RequestPasswordResetUseCase
"""
import asyncio
import hashlib
import logging
import re
from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from feedback_service.adapter.repositories.password_reset_repository import (
    InMemoryPasswordResetStore,
)
from feedback_service.app.services.notification_sink import DispatchResult
from feedback_service.app.use_cases.auth import RequestPasswordResetUseCase
from feedback_service.domain.entities import User

LINK_PATTERN = re.compile(r"(https?://[^\"]+)/reset-password\?token=([0-9a-f]{64})&id=([0-9a-f-]{36})")


@pytest.fixture
def reset_store():
    return InMemoryPasswordResetStore()


@pytest.fixture
def notification_sink():
    sink = AsyncMock()
    sink.send.return_value = DispatchResult.sent()
    return sink


@pytest.fixture
def user():
    return User(id=uuid4(), email="user@example.com", password_hash="x")


def make_use_case(mock_uow, reset_store, notification_sink, frontend_url="http://localhost:5173"):
    return RequestPasswordResetUseCase(mock_uow, reset_store, notification_sink, frontend_url)


@pytest.mark.asyncio
async def test_reset_request_for_known_email(mock_uow, reset_store, notification_sink, user):
    mock_uow.users.get_by_email.return_value = user

    result = await make_use_case(mock_uow, reset_store, notification_sink).execute(user.email)

    assert result.is_ok()
    assert result.value.status == "sent"

    notification_sink.send.assert_called_once()
    message = notification_sink.send.call_args.args[0]
    assert message.to == user.email

    match = LINK_PATTERN.search(message.body)
    assert match is not None
    base, plain_token, link_user_id = match.groups()
    assert base == "http://localhost:5173"
    assert link_user_id == str(user.id)

    token_hash = hashlib.sha256(plain_token.encode()).hexdigest()
    record = await reset_store.find_by_owner_and_hash(user.id, token_hash)
    assert record is not None
    assert record.token_hash != plain_token
    assert record.expires_at - record.created_at == timedelta(hours=1)


@pytest.mark.asyncio
async def test_unknown_email_returns_same_response(mock_uow, reset_store, notification_sink, user):
    mock_uow.users.get_by_email.return_value = user
    known = await make_use_case(mock_uow, reset_store, notification_sink).execute(user.email)

    mock_uow.users.get_by_email.return_value = None
    notification_sink.send.reset_mock()
    unknown = await make_use_case(mock_uow, reset_store, notification_sink).execute("nobody@example.com")

    assert unknown.is_ok()
    assert unknown.value == known.value
    assert reset_store.count() == 1
    notification_sink.send.assert_not_called()


@pytest.mark.asyncio
async def test_failed_dispatch_does_not_fail_request(
    mock_uow, reset_store, notification_sink, user, caplog
):
    mock_uow.users.get_by_email.return_value = user
    notification_sink.send.return_value = DispatchResult.failed("SMTPException: refused")

    with caplog.at_level(logging.WARNING):
        result = await make_use_case(mock_uow, reset_store, notification_sink).execute(user.email)

    assert result.is_ok()
    assert result.value.status == "sent"
    assert "not delivered" in caplog.text
    assert "SMTPException: refused" in caplog.text
    assert reset_store.count() == 1


@pytest.mark.asyncio
async def test_each_request_issues_a_fresh_token(mock_uow, reset_store, notification_sink, user):
    mock_uow.users.get_by_email.return_value = user
    use_case = make_use_case(mock_uow, reset_store, notification_sink)

    await use_case.execute(user.email)
    await use_case.execute(user.email)

    tokens = {
        LINK_PATTERN.search(call.args[0].body).group(2)
        for call in notification_sink.send.call_args_list
    }
    assert len(tokens) == 2
    assert reset_store.count() == 2


@pytest.mark.asyncio
async def test_frontend_url_trailing_slash(mock_uow, reset_store, notification_sink, user):
    mock_uow.users.get_by_email.return_value = user

    await make_use_case(
        mock_uow, reset_store, notification_sink, frontend_url="https://app.example.com/"
    ).execute(user.email)

    body = notification_sink.send.call_args.args[0].body
    assert "https://app.example.com/reset-password?token=" in body


class ExpiringUser:
    """Stands in for an ORM row whose attributes expire when the session rolls back"""

    def __init__(self, user: User):
        self._user = user
        self.expired = False

    def _read(self, name):
        if self.expired:
            raise RuntimeError(f"{name} read after the unit of work closed")
        return getattr(self._user, name)

    @property
    def id(self):
        return self._read("id")

    @property
    def email(self):
        return self._read("email")


@pytest.mark.asyncio
async def test_user_fields_read_before_unit_of_work_closes(
    mock_uow, reset_store, notification_sink, user
):
    row = ExpiringUser(user)
    mock_uow.users.get_by_email.return_value = row

    async def expire(*args):
        row.expired = True
        return False

    mock_uow.__aexit__.side_effect = expire

    result = await make_use_case(mock_uow, reset_store, notification_sink).execute(user.email)

    assert result.is_ok()
    message = notification_sink.send.call_args.args[0]
    assert message.to == user.email
    assert LINK_PATTERN.search(message.body).group(3) == str(user.id)


@pytest.mark.asyncio
async def test_scheduled_delivery_does_not_delay_response(
    mock_uow, reset_store, notification_sink, user, caplog
):
    mock_uow.users.get_by_email.return_value = user
    delivered = asyncio.Event()

    async def slow_send(message):
        await asyncio.sleep(0.2)
        delivered.set()
        return DispatchResult.failed("SMTPServerDisconnected: timed out")

    notification_sink.send.side_effect = slow_send
    scheduled = []
    use_case = RequestPasswordResetUseCase(
        mock_uow,
        reset_store,
        notification_sink,
        "http://localhost:5173",
        schedule=lambda func, *args: scheduled.append((func, args)),
    )

    result = await use_case.execute(user.email)

    assert result.is_ok()
    assert reset_store.count() == 1
    notification_sink.send.assert_not_called()
    [(deliver, args)] = scheduled

    with caplog.at_level(logging.WARNING):
        dispatch = await deliver(*args)

    assert delivered.is_set()
    assert dispatch.delivered is False
    assert "not delivered" in caplog.text
    assert notification_sink.send.call_args.args[0].to == user.email
