"""Service test fixtures - async DB, recording gateway, FastAPI test clients.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - client: get_db overridden to use the test DB (real SqlAlchemyUserGateway)
    - isolated_client: get_user_gateway overridden with a RecordingUserGateway,
      no database involved
    - test_db_manager wraps the test engine; client installs it as db_manager

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.infrastructure.user_gateway import get_user_gateway
import app.infrastructure.database as db_module
import app.models  # noqa: F401
from app.main import app

from tests.services.fake_gateway import RecordingUserGateway


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def test_db_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the in-memory test engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_session_factory, test_db_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = test_db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def fake_gateway():
    return RecordingUserGateway()


@pytest.fixture
async def isolated_client(fake_gateway):
    """FastAPI test client whose gateway is the recording double."""
    app.dependency_overrides[get_user_gateway] = lambda: fake_gateway

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
