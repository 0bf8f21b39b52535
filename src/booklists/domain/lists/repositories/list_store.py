"""Aggregate store interface for book lists.

Mutations of the nested collections go through field-scoped primitives.
Each primitive is one atomic step against the backing store, so
concurrent writers to the same list never overwrite each other's items
and no caller ever needs to load, modify and save a whole list.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence, Union
from uuid import UUID

from booklists.domain.lists.aggregates import BookList
from booklists.domain.lists.value_objects import (
    BookEntry,
    Comment,
    Like,
    SubCollection,
)

SubCollectionItem = Union[BookEntry, Like, Comment]

# Conjunctive equality predicate: field name -> required value
Match = Mapping[str, Any]


class ListStore(ABC):
    """Durable keyed storage of BookList aggregates."""

    @abstractmethod
    async def find_by_id(self, list_id: UUID) -> Optional[BookList]:
        """Load a list with all sub-collections, or None."""

    @abstractmethod
    async def find_all(self) -> Sequence[BookList]:
        """All lists, most recently created first."""

    @abstractmethod
    async def find_by_owner(self, owner_id: UUID) -> Sequence[BookList]:
        """Lists owned by a user, most recently created first."""

    @abstractmethod
    async def create(self, book_list: BookList) -> None:
        """Persist a new list together with any items it already holds."""

    @abstractmethod
    async def delete(self, list_id: UUID) -> bool:
        """
        Delete a list and every item of its sub-collections.

        Returns
        -------
        True if the list existed, False otherwise
        """

    @abstractmethod
    async def delete_by_owner(self, owner_id: UUID) -> int:
        """Delete all lists of an owner. Returns the number deleted."""

    @abstractmethod
    async def find_collection(
        self,
        list_id: UUID,
        collection: SubCollection,
    ) -> tuple[SubCollectionItem, ...]:
        """
        Read one sub-collection, newest item first.

        Raises
        ------
        ListNotFoundError
            If the list does not exist
        """

    @abstractmethod
    async def prepend(
        self,
        list_id: UUID,
        collection: SubCollection,
        item: SubCollectionItem,
    ) -> None:
        """
        Insert an item at the head of a sub-collection.

        Raises
        ------
        ListNotFoundError
            If the list does not exist
        """

    @abstractmethod
    async def append_if_absent(
        self,
        list_id: UUID,
        collection: SubCollection,
        item: SubCollectionItem,
        match: Match,
    ) -> bool:
        """
        Insert an item unless one matching ``match`` is already present.

        Concurrent calls with the same predicate insert exactly once.

        Returns
        -------
        True if the item was inserted, False if a match already existed

        Raises
        ------
        ListNotFoundError
            If the list does not exist
        """

    @abstractmethod
    async def remove_where(
        self,
        list_id: UUID,
        collection: SubCollection,
        match: Match,
    ) -> int:
        """
        Remove every item of a sub-collection matching ``match``.

        Returns
        -------
        Number of removed items; 0 means nothing matched

        Raises
        ------
        ListNotFoundError
            If the list does not exist
        """
