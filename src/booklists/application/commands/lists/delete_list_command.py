"""Delete a list together with its books, likes and comments."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from booklists.application.commands.lists._loading import load_list
from booklists.application.policies import ensure_can_mutate
from booklists.domain.lists import ListAction, ListNotFoundError, ListStore

if TYPE_CHECKING:
    from booklists.application.factories import RepositoryFactory
    from booklists.application.ports.identity import Actor

logger = logging.getLogger(__name__)


class DeleteListCommand:
    """Only the owner may delete a list."""

    def __init__(self, list_store: ListStore):
        self._list_store = list_store

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteListCommand:
        return cls(list_store=factory.list_store())

    async def execute(self, actor: Actor, list_id: str | UUID) -> None:
        book_list = await load_list(self._list_store, list_id)
        ensure_can_mutate(actor, book_list, ListAction.DELETE_LIST)

        if not await self._list_store.delete(book_list.id):
            # Removed by a concurrent request after we loaded it
            raise ListNotFoundError(book_list.id)
        logger.info("User %s deleted list %s", actor.user_id, book_list.id)
