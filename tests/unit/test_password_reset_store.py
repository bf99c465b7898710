"""
Unit tests for the password reset stores and the startup strategy selection
"""
import asyncio
import hashlib
import logging
from datetime import timedelta
from uuid import uuid4

import pytest

from feedback_service.adapter.repositories.password_reset_repository import (
    InMemoryPasswordResetStore,
    PasswordResetRepository,
    create_password_reset_store,
)
from feedback_service.domain.base import utc_now
from feedback_service.domain.entities import PasswordReset


def make_record(user_id=None, token="plain-token", expires_in=timedelta(hours=1)):
    now = utc_now()
    return PasswordReset(
        user_id=user_id or uuid4(),
        token_hash=hashlib.sha256(token.encode()).hexdigest(),
        expires_at=now + expires_in,
        created_at=now,
    )


@pytest.mark.asyncio
async def test_in_memory_put_find_delete():
    store = InMemoryPasswordResetStore()
    record = make_record()

    await store.put(record)
    found = await store.find_by_owner_and_hash(record.user_id, record.token_hash)
    assert found is record

    assert await store.delete(record.id) is True
    assert await store.find_by_owner_and_hash(record.user_id, record.token_hash) is None
    assert store.count() == 0
    assert await store.delete(record.id) is False


@pytest.mark.asyncio
async def test_in_memory_lookup_requires_matching_owner():
    store = InMemoryPasswordResetStore()
    record = make_record()
    await store.put(record)

    assert await store.find_by_owner_and_hash(uuid4(), record.token_hash) is None


@pytest.mark.asyncio
async def test_in_memory_delete_unknown_id_is_noop():
    store = InMemoryPasswordResetStore()
    await store.put(make_record())

    assert await store.delete(uuid4()) is False

    assert store.count() == 1


@pytest.mark.asyncio
async def test_in_memory_keeps_multiple_records_per_user():
    store = InMemoryPasswordResetStore()
    user_id = uuid4()
    first = make_record(user_id, token="first")
    second = make_record(user_id, token="second")

    await asyncio.gather(store.put(first), store.put(second))

    assert await store.find_by_owner_and_hash(user_id, first.token_hash) is first
    assert await store.find_by_owner_and_hash(user_id, second.token_hash) is second


@pytest.mark.asyncio
async def test_in_memory_concurrent_writers_from_threads():
    store = InMemoryPasswordResetStore()
    records = [make_record(token=f"token-{i}") for i in range(50)]

    await asyncio.gather(
        *(asyncio.to_thread(asyncio.run, store.put(record)) for record in records)
    )

    assert store.count() == 50


@pytest.mark.asyncio
async def test_persistent_store_round_trip(tmp_path):
    store = create_password_reset_store(f"sqlite+aiosqlite:///{tmp_path / 'resets.db'}")
    assert isinstance(store, PasswordResetRepository)
    await store.create_schema()

    try:
        record = make_record()
        await store.put(record)

        found = await store.find_by_owner_and_hash(record.user_id, record.token_hash)
        assert found is not None
        assert found.id == record.id
        assert found.expires_at == record.expires_at

        assert await store.find_by_owner_and_hash(uuid4(), record.token_hash) is None

        assert await store.delete(record.id) is True
        assert await store.find_by_owner_and_hash(record.user_id, record.token_hash) is None
        assert await store.delete(record.id) is False
    finally:
        await store.close()


def test_no_connection_string_selects_in_memory_store(caplog):
    with caplog.at_level(logging.WARNING):
        store = create_password_reset_store(None)

    assert isinstance(store, InMemoryPasswordResetStore)
    assert "in-memory" in caplog.text


def test_unusable_connection_string_falls_back_to_in_memory_store(caplog):
    with caplog.at_level(logging.WARNING):
        store = create_password_reset_store("nosuchdialect://localhost/db")

    assert isinstance(store, InMemoryPasswordResetStore)
    assert "falling back" in caplog.text


@pytest.mark.asyncio
async def test_in_memory_delete_claims_record_once():
    store = InMemoryPasswordResetStore()
    record = make_record()
    await store.put(record)

    claims = await asyncio.gather(
        *(asyncio.to_thread(asyncio.run, store.delete(record.id)) for _ in range(10))
    )

    assert claims.count(True) == 1
