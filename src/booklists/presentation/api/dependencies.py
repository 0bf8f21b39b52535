"""Request dependencies: database access, auth services and the caller.

Process-wide objects (engine, session maker, list store) are built lazily
once and cached; everything else is created per request on top of the
request's session.
"""

from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from booklists.application.ports.identity import Actor, IdentityProvider
from booklists.application.services import AuthenticationService
from booklists.domain.lists import ListStore
from booklists.infrastructure.adapters.identity import JWTIdentityProvider
from booklists.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_from_url,
)
from booklists.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyListStore,
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)
from booklists.presentation.api.config import get_api_settings
from booklists_auth import JWTService, PasswordHashingService
from booklists_auth.persistence.sqlalchemy import UserCredentialRepositorySQLAlchemy
from booklists_config.settings import Settings

# auto_error=False: a missing header reaches the identity provider, which
# raises MissingCredentialError like every other auth failure.
bearer_scheme = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    return create_engine_from_url(get_api_settings().database_url)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(get_engine(), class_=AsyncSession, expire_on_commit=False)


@lru_cache(maxsize=1)
def get_list_store() -> ListStore:
    """The shared store; the app lifespan opens and closes it."""
    return SQLAlchemyListStore(
        get_engine(),
        timeout=get_api_settings().store_timeout_seconds,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request. Uncommitted work is rolled back on close."""
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
ListStoreDep = Annotated[ListStore, Depends(get_list_store)]


def get_jwt_service(settings: SettingsDep) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
        refresh_token_expire_days=settings.jwt_refresh_token_expire_days,
    )


def get_password_service() -> PasswordHashingService:
    return PasswordHashingService()


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTServiceDep,
    password_service: Annotated[PasswordHashingService, Depends(get_password_service)],
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


async def get_identity_provider(
    session: DBSession,
    jwt_service: JWTServiceDep,
) -> IdentityProvider:
    return JWTIdentityProvider(
        jwt_service=jwt_service,
        user_repository=UserRepositorySQLAlchemy(session),
    )


async def get_current_actor(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(bearer_scheme),
    ],
    identity_provider: Annotated[IdentityProvider, Depends(get_identity_provider)],
) -> Actor:
    """
    Raises
    ------
    AuthError
        Missing, invalid or expired token, or the user no longer exists
    """
    return await identity_provider.verify(
        credentials.credentials if credentials else None,
    )


async def get_repository_factory(
    session: DBSession,
    list_store: ListStoreDep,
) -> SQLAlchemyRepositoryFactory:
    """Commands and queries build themselves from this via ``from_factory``."""
    return SQLAlchemyRepositoryFactory(session=session, list_store=list_store)


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]
CurrentActor = Annotated[Actor, Depends(get_current_actor)]
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
