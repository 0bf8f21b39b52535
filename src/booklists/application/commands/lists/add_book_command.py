"""Add a book entry to the head of a list."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from booklists.application.commands.lists._loading import load_list
from booklists.application.policies import ensure_can_mutate
from booklists.domain.lists import BookEntry, ListAction, ListStore, SubCollection

if TYPE_CHECKING:
    from booklists.application.factories import RepositoryFactory
    from booklists.application.ports.identity import Actor


class AddBookCommand:
    """Prepend a book entry; the same title may be added any number of times."""

    def __init__(self, list_store: ListStore):
        self._list_store = list_store

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AddBookCommand:
        return cls(list_store=factory.list_store())

    async def execute(
        self,
        actor: Actor,
        list_id: str | UUID,
        title: str,
    ) -> tuple[BookEntry, ...]:
        """
        Returns
        -------
        The list's book entries after the insert, newest first

        Raises
        ------
        ValidationError
            If the title is empty
        ListNotFoundError
            If the list does not exist
        """
        entry = BookEntry.create(
            title=title,
            name=actor.display_name,
            user_id=actor.user_id,
        )
        book_list = await load_list(self._list_store, list_id)
        ensure_can_mutate(actor, book_list, ListAction.ADD_BOOK)

        await self._list_store.prepend(book_list.id, SubCollection.BOOKS, entry)
        return await self._list_store.find_collection(
            book_list.id,
            SubCollection.BOOKS,
        )
