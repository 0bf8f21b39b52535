"""Shared lookup used by the list commands."""

from uuid import UUID

from booklists.domain.lists import BookList, ListNotFoundError, ListStore
from booklists.domain.shared.identifiers import parse_identifier


async def load_list(list_store: ListStore, list_id: str | UUID) -> BookList:
    """Parse the id and load a snapshot of the list for validation.

    Raises
    ------
    InvalidIdentifierError
        If the id is malformed (before any store call)
    ListNotFoundError
        If no list has that id
    """
    parsed = parse_identifier(list_id, kind="list")
    book_list = await list_store.find_by_id(parsed)
    if book_list is None:
        raise ListNotFoundError(parsed)
    return book_list
