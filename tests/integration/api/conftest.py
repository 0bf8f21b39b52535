"""Fixtures for API tests against a real SQLite database.

The application lifespan is not entered (the TestClient is not used as a
context manager); tables are created up front and the store, session and
settings dependencies are overridden instead.
"""

import asyncio
from typing import Callable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from booklists.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_from_url,
    create_tables,
)
from booklists.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyListStore,
)
from booklists.presentation.api.app import create_app
from booklists.presentation.api.config import get_api_settings
from booklists.presentation.api.dependencies import (
    get_db_session,
    get_list_store,
    get_password_service,
)
from booklists_auth import PasswordHashingService
from booklists_config.settings import Settings

PASSWORD = "correct-horse"


@pytest.fixture
def password() -> str:
    return PASSWORD


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return Settings(
        jwt_secret_key="api-test-secret",
        postgres_password="unused",
        database_dsn=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        registration_enabled=True,
    )


@pytest.fixture
def api_engine(api_settings):
    engine = create_engine_from_url(api_settings.database_url, poolclass=NullPool)
    asyncio.run(create_tables(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def app(api_settings, api_engine):
    app = create_app(api_settings)
    session_maker = async_sessionmaker(
        api_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    list_store = SQLAlchemyListStore(api_engine, timeout=30)

    async def _session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = _session
    app.dependency_overrides[get_list_store] = lambda: list_store
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    app.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
        rounds=4,
    )
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def register(client) -> Callable[..., dict]:
    """Register a user and return the auth response plus ready-made headers."""

    def _register(username: str, email: str | None = None) -> dict:
        response = client.post(
            "/api/v1/auth/register",
            json={
                "username": username,
                "email": email or f"{username}@example.com",
                "password": PASSWORD,
            },
        )
        assert response.status_code == 201, response.text
        body = response.json()
        body["headers"] = {"Authorization": f"Bearer {body['access_token']}"}
        return body

    return _register


@pytest.fixture
def alice(register) -> dict:
    return register("alice")


@pytest.fixture
def bob(register) -> dict:
    return register("bob")
