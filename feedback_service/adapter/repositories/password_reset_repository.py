import logging
import threading
from typing import Dict, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import ArgumentError, InvalidRequestError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from feedback_service.app.repositories.password_reset_repository import IPasswordResetStore
from feedback_service.domain.entities import PasswordReset

logger = logging.getLogger(__name__)


class PasswordResetRepository(IPasswordResetStore):
    """
    Persistent reset store using SQLModel.

    Each call runs in its own short session and commits immediately, so a
    record is visible to other workers as soon as put() returns.
    """

    def __init__(self, session_factory: sessionmaker, engine: Optional[AsyncEngine] = None):
        self.session_factory = session_factory
        self.engine = engine

    async def put(self, record: PasswordReset) -> PasswordReset:
        async with self.session_factory() as session:
            session.add(record)
            await session.commit()
        return record

    async def find_by_owner_and_hash(
        self, user_id: UUID, token_hash: str
    ) -> Optional[PasswordReset]:
        async with self.session_factory() as session:
            stmt = select(PasswordReset).where(
                PasswordReset.user_id == user_id,
                PasswordReset.token_hash == token_hash,
            )
            result = await session.exec(stmt)
            return result.first()

    async def delete(self, record_id: UUID) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(PasswordReset).where(PasswordReset.id == record_id)
            )
            await session.commit()
        return result.rowcount > 0

    async def create_schema(self) -> None:
        """Create the password_resets table if it is missing"""
        if self.engine is None:
            return
        async with self.engine.begin() as conn:
            await conn.run_sync(PasswordReset.__table__.create, checkfirst=True)

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


class InMemoryPasswordResetStore(IPasswordResetStore):
    """
    Process-local reset store keyed by token hash.

    Development only: records vanish on restart and are not shared between
    worker processes. The lock keeps concurrent requests in one process safe.
    """

    def __init__(self):
        self._records: Dict[str, PasswordReset] = {}
        self._lock = threading.Lock()

    async def put(self, record: PasswordReset) -> PasswordReset:
        with self._lock:
            self._records[record.token_hash] = record
        return record

    async def find_by_owner_and_hash(
        self, user_id: UUID, token_hash: str
    ) -> Optional[PasswordReset]:
        with self._lock:
            record = self._records.get(token_hash)
        if record is None or record.user_id != user_id:
            return None
        return record

    async def delete(self, record_id: UUID) -> bool:
        with self._lock:
            for token_hash, record in self._records.items():
                if record.id == record_id:
                    del self._records[token_hash]
                    return True
        return False

    def count(self) -> int:
        with self._lock:
            return len(self._records)


def create_password_reset_store(db_uri: Optional[str]) -> IPasswordResetStore:
    """
    Pick the reset store once, at startup.

    A configured connection string gives the persistent store. No connection
    string, or one no engine can be built for, gives the in-memory store.
    """
    if not db_uri:
        logger.warning(
            "PASSWORD RESET: no RESET_STORE_DB_URI configured, using in-memory "
            "reset store (development only, records are lost on restart)"
        )
        return InMemoryPasswordResetStore()

    try:
        engine = create_async_engine(db_uri, echo=False, future=True)
    except (ArgumentError, InvalidRequestError, ImportError) as exc:
        logger.error(
            "PASSWORD RESET: cannot build engine for reset store (%s), "
            "falling back to in-memory reset store (development only)",
            exc,
        )
        return InMemoryPasswordResetStore()

    session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    return PasswordResetRepository(session_factory, engine=engine)
