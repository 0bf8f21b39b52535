"""Engine construction and schema management for both metadata sets."""

import logging
from pathlib import Path
from typing import Callable, Optional

from sqlalchemy import MetaData
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Registers every application table on Base.metadata
import booklists.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from booklists.infrastructure.persistence.sqlalchemy.models.base import Base
from booklists_auth.persistence.sqlalchemy import AuthBase
from booklists_config.settings import get_settings

logger = logging.getLogger(__name__)

ALL_METADATA: tuple[MetaData, ...] = (Base.metadata, AuthBase.metadata)


def create_engine_from_url(database_url: str, **kwargs) -> AsyncEngine:
    """
    Build an async engine. For file-backed SQLite the parent directory is
    created first, since SQLite will not create it.
    """
    url = make_url(database_url)
    on_disk = url.database not in (None, "", ":memory:")
    if url.get_backend_name() == "sqlite" and on_disk:
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    kwargs.setdefault("pool_pre_ping", True)
    return create_async_engine(url, echo=False, **kwargs)


def display_url(database_url: str) -> str:
    """The URL with any password masked, for printing."""
    return make_url(database_url).render_as_string(hide_password=True)


async def _run_on_all(
    engine: Optional[AsyncEngine],
    action: Callable[[MetaData], Callable],
    reverse: bool = False,
) -> None:
    owns_engine = engine is None
    engine = engine or create_engine_from_url(get_settings().database_url)
    metadatas = reversed(ALL_METADATA) if reverse else ALL_METADATA
    try:
        async with engine.begin() as conn:
            for metadata in metadatas:
                await conn.run_sync(action(metadata))
    finally:
        if owns_engine:
            await engine.dispose()


async def create_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Create missing tables. Existing tables and rows are not touched.

    Without an engine one is built from the settings and disposed afterwards.
    """
    await _run_on_all(engine, lambda metadata: metadata.create_all)
    logger.info("Database schema is up to date")


async def drop_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Drop every table. All data is lost."""
    logger.warning("Dropping all database tables")
    await _run_on_all(engine, lambda metadata: metadata.drop_all, reverse=True)


async def reset_tables(engine: Optional[AsyncEngine] = None) -> None:
    await drop_tables(engine)
    await create_tables(engine)
