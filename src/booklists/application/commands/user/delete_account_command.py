"""Delete the caller's account and everything it owns."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from booklists.domain.lists import ListStore
from booklists.domain.user import UserNotFoundError, UserRepository
from booklists_auth.repositories import UserCredentialRepository

if TYPE_CHECKING:
    from booklists.application.factories import RepositoryFactory
    from booklists.application.ports.identity import Actor

logger = logging.getLogger(__name__)


class DeleteAccountCommand:
    """
    Remove the caller's lists, credentials and user record.

    The lists go first, in the store's own transaction; credentials and
    the user row are removed through the request session, which the
    caller commits. Likes, comments and book entries the user left on
    other people's lists stay in place.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        list_store: ListStore,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._list_store = list_store

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteAccountCommand:
        return cls(
            user_repository=factory.user_repository(),
            credential_repository=factory.credential_repository(),
            list_store=factory.list_store(),
        )

    async def execute(self, actor: Actor) -> int:
        """
        Returns
        -------
        Number of lists that were deleted with the account
        """
        user = await self._user_repo.find_by_id(actor.user_id)
        if user is None:
            raise UserNotFoundError(actor.user_id)

        deleted_lists = await self._list_store.delete_by_owner(user.id)
        await self._credential_repo.delete(user.id)
        await self._user_repo.delete(user.id)

        logger.info(
            "Deleted account %s together with %d list(s)",
            user.id,
            deleted_lists,
        )
        return deleted_lists
