"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from booklists.domain.lists import ListStore
from booklists.domain.user import UserRepository
from booklists_auth.repositories import UserCredentialRepository


class RepositoryFactory(Protocol):
    """Protocol for handing stores and repositories to commands and queries."""

    @property
    def session(self) -> Any:
        """The request's database session, for commit/rollback.

        Typed as Any to keep the application layer free of SQLAlchemy.
        The list store does not use it; it runs its own transactions.
        """
        ...

    def list_store(self) -> ListStore:
        ...

    def user_repository(self) -> UserRepository:
        ...

    def credential_repository(self) -> UserCredentialRepository:
        ...
