"""SQLAlchemy repository factory handed to commands and queries."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from booklists.domain.lists import ListStore
from booklists.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)
from booklists_auth.persistence.sqlalchemy import UserCredentialRepositorySQLAlchemy


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    Session-scoped repositories share the request's session; the list store
    is the application-wide instance and manages its own transactions.
    """

    def __init__(self, session: AsyncSession, list_store: ListStore):
        self._session = session
        self._list_store = list_store
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._credential_repo: UserCredentialRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def list_store(self) -> ListStore:
        return self._list_store

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def credential_repository(self) -> UserCredentialRepositorySQLAlchemy:
        if self._credential_repo is None:
            self._credential_repo = UserCredentialRepositorySQLAlchemy(self._session)
        return self._credential_repo
