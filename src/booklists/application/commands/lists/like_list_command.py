"""Like and unlike a list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from booklists.application.commands.lists._loading import load_list
from booklists.application.policies import ensure_can_mutate
from booklists.domain.lists import (
    AlreadyLikedError,
    Like,
    ListAction,
    ListStore,
    NotLikedError,
    SubCollection,
)

if TYPE_CHECKING:
    from booklists.application.factories import RepositoryFactory
    from booklists.application.ports.identity import Actor

logger = logging.getLogger(__name__)


class LikeListCommand:
    """Add the caller's like, at most once per list.

    Uniqueness is decided by the store's append-if-absent primitive, not by
    the loaded snapshot, so two racing likes from one user insert once.
    """

    def __init__(self, list_store: ListStore):
        self._list_store = list_store

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> LikeListCommand:
        return cls(list_store=factory.list_store())

    async def execute(self, actor: Actor, list_id: str | UUID) -> tuple[Like, ...]:
        book_list = await load_list(self._list_store, list_id)
        ensure_can_mutate(actor, book_list, ListAction.LIKE)

        inserted = await self._list_store.append_if_absent(
            book_list.id,
            SubCollection.LIKES,
            Like.create(actor.user_id),
            match={"user_id": actor.user_id},
        )
        if not inserted:
            raise AlreadyLikedError(book_list.id, actor.user_id)

        logger.debug("User %s liked list %s", actor.user_id, book_list.id)
        return await self._list_store.find_collection(
            book_list.id,
            SubCollection.LIKES,
        )


class UnlikeListCommand:
    def __init__(self, list_store: ListStore):
        self._list_store = list_store

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UnlikeListCommand:
        return cls(list_store=factory.list_store())

    async def execute(self, actor: Actor, list_id: str | UUID) -> tuple[Like, ...]:
        """
        Raises
        ------
        NotLikedError
            If the caller has no like on the list
        """
        book_list = await load_list(self._list_store, list_id)
        ensure_can_mutate(actor, book_list, ListAction.UNLIKE)

        removed = await self._list_store.remove_where(
            book_list.id,
            SubCollection.LIKES,
            match={"user_id": actor.user_id},
        )
        if removed == 0:
            raise NotLikedError(book_list.id, actor.user_id)

        logger.debug("User %s unliked list %s", actor.user_id, book_list.id)
        return await self._list_store.find_collection(
            book_list.id,
            SubCollection.LIKES,
        )
