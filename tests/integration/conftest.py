from typing import List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from feedback_service.adapter.repositories.password_reset_repository import (
    InMemoryPasswordResetStore,
)
from feedback_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from feedback_service.app.services.notification_sink import (
    DispatchResult,
    INotificationSink,
    MailMessage,
)
from feedback_service.depends import (
    get_notification_sink,
    get_password_reset_store,
    get_unit_of_work,
)
import feedback_service.domain.entities  # noqa: F401  registers tables on SQLModel.metadata


class RecordingNotificationSink(INotificationSink):
    """Keeps every message instead of mailing it; set fail to simulate an outage"""

    def __init__(self):
        self.messages: List[MailMessage] = []
        self.fail = False

    async def send(self, message: MailMessage) -> DispatchResult:
        self.messages.append(message)
        if self.fail:
            return DispatchResult.failed("SMTPServerDisconnected: Connection unexpectedly closed")
        return DispatchResult.sent()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def reset_store():
    return InMemoryPasswordResetStore()


@pytest.fixture
def notification_sink():
    return RecordingNotificationSink()


@pytest_asyncio.fixture
async def client(db_session, reset_store, notification_sink):
    from feedback_service.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_reset_store] = lambda: reset_store
    app.dependency_overrides[get_notification_sink] = lambda: notification_sink

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
