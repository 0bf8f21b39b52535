"""Add and remove "about me" entries on the caller's profile."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from booklists.domain.shared.identifiers import parse_identifier
from booklists.domain.user import (
    AboutEntry,
    AboutEntryNotFoundError,
    User,
    UserNotFoundError,
    UserRepository,
)

if TYPE_CHECKING:
    from booklists.application.factories import RepositoryFactory
    from booklists.application.ports.identity import Actor


class AddAboutEntryCommand:
    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AddAboutEntryCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(self, actor: Actor, text: str) -> User:
        entry = AboutEntry.create(text)
        if not await self._user_repo.prepend_about_entry(actor.user_id, entry):
            raise UserNotFoundError(actor.user_id)
        return await _reload(self._user_repo, actor.user_id)


class RemoveAboutEntryCommand:
    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> RemoveAboutEntryCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(self, actor: Actor, entry_id: str | UUID) -> User:
        """
        Raises
        ------
        InvalidIdentifierError
            If the entry id is malformed
        AboutEntryNotFoundError
            If no entry with that id belongs to the caller
        """
        parsed = parse_identifier(entry_id, kind="about entry")
        removed = await self._user_repo.remove_about_entry(actor.user_id, parsed)
        if removed == 0:
            raise AboutEntryNotFoundError(actor.user_id, parsed)
        return await _reload(self._user_repo, actor.user_id)


async def _reload(user_repo: UserRepository, user_id: UUID) -> User:
    user = await user_repo.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user
