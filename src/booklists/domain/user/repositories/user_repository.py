"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union
from uuid import UUID

from booklists.domain.user.aggregates.user import User
from booklists.domain.user.value_objects import AboutEntry, Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by id, or None."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by email address.

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check whether any user is registered with the email."""

    @abstractmethod
    async def find_all(self) -> Sequence[User]:
        """All users, oldest first."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Create a user or update its username and email.

        About entries are not written here; use the entry primitives.

        Raises
        ------
        EmailAlreadyExistsError
            If email is already in use by another user
        """

    @abstractmethod
    async def prepend_about_entry(self, user_id: UUID, entry: AboutEntry) -> bool:
        """
        Atomically add an about entry at the head of the user's entries.

        Returns
        -------
        True if inserted, False if the user does not exist
        """

    @abstractmethod
    async def remove_about_entry(self, user_id: UUID, entry_id: UUID) -> int:
        """Remove the entry with ``entry_id`` owned by the user. Returns count."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Delete the user record and its about entries."""
