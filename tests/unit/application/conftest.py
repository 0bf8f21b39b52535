"""Shared fixtures for application layer unit tests."""

from unittest.mock import AsyncMock
from uuid import UUID

import pytest

from booklists.application.ports.identity import Actor
from booklists.domain.lists import BookList, Comment, ListStore

OWNER_ID = UUID("12345678-1234-5678-1234-567812345678")
OTHER_ID = UUID("00000000-0000-0000-0000-000000000001")


@pytest.fixture
def owner() -> Actor:
    return Actor(user_id=OWNER_ID, display_name="alice")


@pytest.fixture
def other() -> Actor:
    return Actor(user_id=OTHER_ID, display_name="bob")


@pytest.fixture
def book_list() -> BookList:
    return BookList.create(name="Sci-Fi", owner_id=OWNER_ID)


@pytest.fixture
def commented_list(book_list) -> BookList:
    """A list carrying one comment written by OTHER_ID."""
    comment = Comment.create(text="Nice picks", name="bob", user_id=OTHER_ID)
    return BookList.reconstitute(
        id=book_list.id,
        name=book_list.name,
        owner_id=book_list.owner_id,
        created_at=book_list.created_at,
        books=(),
        likes=(),
        comments=(comment,),
    )


@pytest.fixture
def list_store(book_list) -> AsyncMock:
    """A ListStore mock that finds ``book_list`` by default."""
    store = AsyncMock(spec=ListStore)
    store.find_by_id.return_value = book_list
    store.find_collection.return_value = ()
    return store
