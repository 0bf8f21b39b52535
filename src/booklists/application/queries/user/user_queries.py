"""Queries for user profiles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence
from uuid import UUID

from booklists.domain.shared.identifiers import parse_identifier
from booklists.domain.user import User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from booklists.application.factories import RepositoryFactory
    from booklists.application.ports.identity import Actor


class GetCurrentUserQuery:
    """Query to retrieve the authenticated caller's user record."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetCurrentUserQuery:
        return cls(user_repo=factory.user_repository())

    async def execute(self, actor: Actor) -> User:
        user = await self._user_repo.find_by_id(actor.user_id)
        if user is None:
            raise UserNotFoundError(actor.user_id)
        return user


class GetUserQuery:
    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserQuery:
        return cls(user_repo=factory.user_repository())

    async def execute(self, user_id: str | UUID) -> User:
        parsed = parse_identifier(user_id, kind="user")
        user = await self._user_repo.find_by_id(parsed)
        if user is None:
            raise UserNotFoundError(parsed)
        return user


class ListUsersQuery:
    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListUsersQuery:
        return cls(user_repo=factory.user_repository())

    async def execute(self) -> Sequence[User]:
        return await self._user_repo.find_all()
