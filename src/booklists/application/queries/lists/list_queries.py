"""Read-only queries over book lists."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence
from uuid import UUID

from booklists.domain.lists import BookList, ListNotFoundError, ListStore
from booklists.domain.shared.identifiers import parse_identifier

if TYPE_CHECKING:
    from booklists.application.factories import RepositoryFactory


class ListListsQuery:
    """All lists, most recently created first. Public."""

    def __init__(self, list_store: ListStore):
        self._list_store = list_store

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListListsQuery:
        return cls(list_store=factory.list_store())

    async def execute(self) -> Sequence[BookList]:
        return await self._list_store.find_all()


class GetListQuery:
    def __init__(self, list_store: ListStore):
        self._list_store = list_store

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetListQuery:
        return cls(list_store=factory.list_store())

    async def execute(self, list_id: str | UUID) -> BookList:
        """
        Raises
        ------
        InvalidIdentifierError
            If the id is malformed
        ListNotFoundError
            If the id is well formed but no list has it
        """
        parsed = parse_identifier(list_id, kind="list")
        book_list = await self._list_store.find_by_id(parsed)
        if book_list is None:
            raise ListNotFoundError(parsed)
        return book_list


class ListsByOwnerQuery:
    """Lists owned by one user, most recently created first.

    Also serves "my lists" for the authenticated caller.
    """

    def __init__(self, list_store: ListStore):
        self._list_store = list_store

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListsByOwnerQuery:
        return cls(list_store=factory.list_store())

    async def execute(self, owner_id: str | UUID) -> Sequence[BookList]:
        parsed = parse_identifier(owner_id, kind="user")
        return await self._list_store.find_by_owner(parsed)
