"""Service test fixtures — key-value stores, session stores, async DB, FastAPI client.

Invariants:
    - Every test gets fresh storage (in-memory dict or in-memory SQLite)
    - RecordingKeyValueStore logs every call so tests can assert "no persistence"
    - The FastAPI client swaps the session store through dependency_overrides

Design Decisions:
    - SQLite in-memory: fast, no external dependency
    - db_manager patched with a manager bound to the test engine, the same way
      readiness probes reach it in production
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from campushub.api.dependencies import get_session_store
from campushub.core.errors import PersistenceError
from campushub.db.base import Base
from campushub.db.session import create_schema
from campushub.infrastructure.database import DatabaseSessionManager
from campushub.infrastructure.kv_store import InMemoryKeyValueStore
from campushub.services.session_store import SessionStore
import campushub.infrastructure.database as db_module
from campushub.main import app


class RecordingKeyValueStore(InMemoryKeyValueStore):
    """In-memory store that records (operation, key) for each call."""

    def __init__(self):
        super().__init__()
        self.calls: list[tuple[str, str]] = []

    async def get(self, key):
        self.calls.append(("get", key))
        return await super().get(key)

    async def set(self, key, value):
        self.calls.append(("set", key))
        await super().set(key, value)

    async def delete(self, key):
        self.calls.append(("delete", key))
        await super().delete(key)

    @property
    def writes(self) -> list[tuple[str, str]]:
        return [c for c in self.calls if c[0] != "get"]


class FailingKeyValueStore:
    """Store whose every operation raises PersistenceError."""

    def __init__(self):
        self.calls: list[str] = []

    async def get(self, key):
        self.calls.append("get")
        raise PersistenceError("device storage unavailable", "read")

    async def set(self, key, value):
        self.calls.append("set")
        raise PersistenceError("device storage unavailable", "write")

    async def delete(self, key):
        self.calls.append("delete")
        raise PersistenceError("device storage unavailable", "delete")


@pytest.fixture
def kv_store():
    return RecordingKeyValueStore()


@pytest.fixture
def failing_kv_store():
    return FailingKeyValueStore()


@pytest.fixture
async def session_store(kv_store):
    """Initialized session store over an empty recording store."""
    store = SessionStore(kv_store)
    await store.initialize()
    kv_store.calls.clear()
    return store


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    await create_schema(engine)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_manager(test_engine):
    """DatabaseSessionManager bound to the in-memory test engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    original_manager = db_module.db_manager
    db_module.db_manager = manager
    yield manager
    db_module.db_manager = original_manager


@pytest.fixture
async def client(session_store):
    """FastAPI test client with the session store overridden."""
    app.dependency_overrides[get_session_store] = lambda: session_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
