"""Create a new, empty book list owned by the caller."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from booklists.domain.lists import BookList, ListStore

if TYPE_CHECKING:
    from booklists.application.factories import RepositoryFactory
    from booklists.application.ports.identity import Actor

logger = logging.getLogger(__name__)


class CreateListCommand:
    def __init__(self, list_store: ListStore):
        self._list_store = list_store

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateListCommand:
        return cls(list_store=factory.list_store())

    async def execute(self, actor: Actor, name: str) -> BookList:
        """
        Raises
        ------
        ValidationError
            If the name is empty or whitespace only
        """
        book_list = BookList.create(name=name, owner_id=actor.user_id)
        await self._list_store.create(book_list)
        logger.info("User %s created list %s", actor.user_id, book_list.id)
        return book_list
