"""Add and delete comments on a list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from booklists.application.commands.lists._loading import load_list
from booklists.application.policies import ensure_can_mutate
from booklists.domain.lists import (
    Comment,
    CommentNotFoundError,
    ListAction,
    ListStore,
    SubCollection,
)
from booklists.domain.shared.identifiers import parse_identifier

if TYPE_CHECKING:
    from booklists.application.factories import RepositoryFactory
    from booklists.application.ports.identity import Actor

logger = logging.getLogger(__name__)


class AddCommentCommand:
    def __init__(self, list_store: ListStore):
        self._list_store = list_store

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AddCommentCommand:
        return cls(list_store=factory.list_store())

    async def execute(
        self,
        actor: Actor,
        list_id: str | UUID,
        text: str,
    ) -> tuple[Comment, ...]:
        """
        Prepend a comment and return the list's comments, newest first.

        The new comment's id is that of the first element.

        Raises
        ------
        ValidationError
            If the text is empty
        ListNotFoundError
            If the list does not exist
        """
        comment = Comment.create(
            text=text,
            name=actor.display_name,
            user_id=actor.user_id,
        )
        book_list = await load_list(self._list_store, list_id)
        ensure_can_mutate(actor, book_list, ListAction.ADD_COMMENT)

        await self._list_store.prepend(book_list.id, SubCollection.COMMENTS, comment)
        logger.debug("User %s commented on list %s", actor.user_id, book_list.id)
        return await self._list_store.find_collection(
            book_list.id,
            SubCollection.COMMENTS,
        )


class DeleteCommentCommand:
    """Remove one comment by id. Only its author may do so."""

    def __init__(self, list_store: ListStore):
        self._list_store = list_store

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCommentCommand:
        return cls(list_store=factory.list_store())

    async def execute(
        self,
        actor: Actor,
        list_id: str | UUID,
        comment_id: str | UUID,
    ) -> tuple[Comment, ...]:
        """
        Raises
        ------
        InvalidIdentifierError
            If either id is malformed
        ListNotFoundError
            If the list does not exist
        CommentNotFoundError
            If the list has no comment with that id
        ForbiddenError
            If the caller did not write the comment
        """
        parsed_comment_id = parse_identifier(comment_id, kind="comment")
        book_list = await load_list(self._list_store, list_id)

        comment = book_list.find_comment(parsed_comment_id)
        if comment is None:
            raise CommentNotFoundError(book_list.id, parsed_comment_id)
        ensure_can_mutate(actor, book_list, ListAction.DELETE_COMMENT, comment)

        removed = await self._list_store.remove_where(
            book_list.id,
            SubCollection.COMMENTS,
            match={"id": parsed_comment_id, "user_id": actor.user_id},
        )
        if removed == 0:
            # Deleted concurrently since the snapshot was taken
            raise CommentNotFoundError(book_list.id, parsed_comment_id)

        logger.debug(
            "User %s deleted comment %s on list %s",
            actor.user_id,
            parsed_comment_id,
            book_list.id,
        )
        return await self._list_store.find_collection(
            book_list.id,
            SubCollection.COMMENTS,
        )
