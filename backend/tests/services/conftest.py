"""Service test fixtures: rule services over fakes, async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use the test DB through DatabaseSessionManager,
      so request-level rollback behaves as in production
    - db_manager patched so the readiness probe sees the test database

Design Decisions:
    - StaticPool: one shared connection keeps the in-memory database alive
      across sessions
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from social_api.db.base import Base
from social_api.infrastructure.database import (
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
from social_api.infrastructure.sql_repositories import (
    SqlAccountRepository, SqlMessageRepository,
)
from social_api.services.account_rules import AccountRules
from social_api.services.message_rules import MessageRules
import social_api.infrastructure.database as db_module
import social_api.models  # noqa: F401
from social_api.main import app
from tests.services.fakes import InMemoryAccountRepository, InMemoryMessageRepository

TEST_HASH_ITERATIONS = 1000


@pytest.fixture
def account_repo():
    return InMemoryAccountRepository()


@pytest.fixture
def message_repo():
    return InMemoryMessageRepository()


@pytest.fixture
def account_rules(account_repo):
    return AccountRules(account_repo, hash_iterations=TEST_HASH_ITERATIONS)


@pytest.fixture
def message_rules(message_repo, account_repo):
    return MessageRules(message_repo, account_repo)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
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
def sql_accounts(test_db):
    return SqlAccountRepository(test_db)


@pytest.fixture
def sql_messages(test_db):
    return SqlMessageRepository(test_db)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
