import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.credential_codec import CredentialCodec
from src.app.services.mail_dispatcher import MailDispatcher
from src.depends import (
    get_credential_codec,
    get_mail_dispatcher,
    get_mail_sender,
    get_unit_of_work,
)
from tests.fixtures.mail_outbox import MailOutbox


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
def outbox():
    return MailOutbox()


@pytest.fixture
def dispatcher():
    return MailDispatcher()


@pytest_asyncio.fixture
async def client(session_factory, outbox, dispatcher):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_credential_codec] = lambda: CredentialCodec(rounds=4)
    app.dependency_overrides[get_mail_sender] = lambda: outbox
    app.dependency_overrides[get_mail_dispatcher] = lambda: dispatcher

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
