"""Fixtures shared by the SQLite-backed integration tests.

Each test gets its own database file. NullPool hands every transaction a
fresh connection, so concurrent store calls really run on separate SQLite
connections and contend for the database lock.
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from booklists.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_from_url,
    create_tables,
)
from booklists.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyListStore,
)

# Generous bound so that lock waits under concurrency never trip it
TEST_STORE_TIMEOUT = 30.0


def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'booklists.db'}"


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_engine_from_url(sqlite_url(tmp_path), poolclass=NullPool)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def list_store(engine) -> SQLAlchemyListStore:
    store = SQLAlchemyListStore(engine, timeout=TEST_STORE_TIMEOUT)
    await store.open()
    return store


@pytest_asyncio.fixture
async def session(engine):
    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session
        await session.rollback()
