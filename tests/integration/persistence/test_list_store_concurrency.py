"""Concurrent mutations of one list through the commands and the store.

Every call runs on its own SQLite connection (NullPool), so these tests
exercise the database's own serialization of writers rather than the
event loop's.
"""

import asyncio
from uuid import UUID

import pytest
from sqlalchemy import func, select

from booklists.application.commands.lists import (
    AddBookCommand,
    AddCommentCommand,
    DeleteCommentCommand,
    DeleteListCommand,
    LikeListCommand,
    UnlikeListCommand,
)
from booklists.application.ports.identity import Actor
from booklists.domain.lists import (
    AlreadyLikedError,
    BookList,
    ListNotFoundError,
    NotLikedError,
    SubCollection,
)
from booklists.infrastructure.persistence.sqlalchemy.models import CommentModel

pytestmark = [pytest.mark.integration, pytest.mark.slow]

OWNER = Actor(
    user_id=UUID("12345678-1234-5678-1234-567812345678"),
    display_name="alice",
)
READERS = [
    Actor(user_id=UUID(int=i + 1), display_name=f"reader{i}") for i in range(10)
]


@pytest.fixture
async def book_list(list_store) -> BookList:
    book_list = BookList.create(name="Sci-Fi", owner_id=OWNER.user_id)
    await list_store.create(book_list)
    return book_list


@pytest.mark.asyncio
async def test_concurrent_book_adds_are_all_kept(list_store, book_list):
    command = AddBookCommand(list_store)

    await asyncio.gather(
        *(command.execute(OWNER, book_list.id, f"Book {i}") for i in range(20)),
    )

    books = await list_store.find_collection(book_list.id, SubCollection.BOOKS)
    assert len(books) == 20
    assert {b.title for b in books} == {f"Book {i}" for i in range(20)}


@pytest.mark.asyncio
async def test_racing_likes_from_one_user_insert_once(list_store, book_list):
    command = LikeListCommand(list_store)
    reader = READERS[0]

    results = await asyncio.gather(
        *(command.execute(reader, str(book_list.id)) for _ in range(10)),
        return_exceptions=True,
    )

    successes = [r for r in results if not isinstance(r, Exception)]
    failures = [r for r in results if isinstance(r, Exception)]
    assert len(successes) == 1
    assert len(failures) == 9
    assert all(isinstance(f, AlreadyLikedError) for f in failures)

    likes = await list_store.find_collection(book_list.id, SubCollection.LIKES)
    assert [like.user_id for like in likes] == [reader.user_id]


@pytest.mark.asyncio
async def test_likes_from_many_users_all_count(list_store, book_list):
    command = LikeListCommand(list_store)

    await asyncio.gather(*(command.execute(r, book_list.id) for r in READERS))

    found = await list_store.find_by_id(book_list.id)
    assert found.like_count == len(READERS)


@pytest.mark.asyncio
async def test_racing_unlikes_remove_once(list_store, book_list):
    reader = READERS[0]
    await LikeListCommand(list_store).execute(reader, book_list.id)
    command = UnlikeListCommand(list_store)

    results = await asyncio.gather(
        *(command.execute(reader, book_list.id) for _ in range(5)),
        return_exceptions=True,
    )

    failures = [r for r in results if isinstance(r, Exception)]
    assert len(failures) == 4
    assert all(isinstance(f, NotLikedError) for f in failures)
    assert await list_store.find_collection(book_list.id, SubCollection.LIKES) == ()


@pytest.mark.asyncio
async def test_sibling_collections_do_not_overwrite_each_other(
    list_store, book_list
):
    add_book = AddBookCommand(list_store)
    add_comment = AddCommentCommand(list_store)
    like = LikeListCommand(list_store)

    await asyncio.gather(
        *(add_book.execute(OWNER, book_list.id, f"Book {i}") for i in range(5)),
        *(add_comment.execute(r, book_list.id, f"Nice {r}") for r in READERS[:5]),
        *(like.execute(r, book_list.id) for r in READERS[5:]),
    )

    found = await list_store.find_by_id(book_list.id)
    assert len(found.books) == 5
    assert len(found.comments) == 5
    assert found.like_count == 5


@pytest.mark.asyncio
async def test_comments_racing_a_delete_leave_no_orphans(
    list_store, book_list, session
):
    add_comment = AddCommentCommand(list_store)

    results = await asyncio.gather(
        *(add_comment.execute(r, book_list.id, "first!") for r in READERS),
        DeleteListCommand(list_store).execute(OWNER, book_list.id),
        return_exceptions=True,
    )

    unexpected = [
        r
        for r in results
        if isinstance(r, Exception) and not isinstance(r, ListNotFoundError)
    ]
    assert unexpected == []
    assert await list_store.find_by_id(book_list.id) is None

    orphans = await session.scalar(
        select(func.count())
        .select_from(CommentModel)
        .where(CommentModel.list_id == book_list.id),
    )
    assert orphans == 0


@pytest.mark.asyncio
async def test_deleting_a_comment_while_others_are_added(list_store, book_list):
    author, others = READERS[0], READERS[1:]
    add_comment = AddCommentCommand(list_store)
    await add_comment.execute(OWNER, book_list.id, "sibling")
    before = await add_comment.execute(author, book_list.id, "doomed")
    doomed, sibling = before

    await asyncio.gather(
        DeleteCommentCommand(list_store).execute(author, book_list.id, doomed.id),
        *(add_comment.execute(r, book_list.id, f"hi from {r.user_id}") for r in others),
    )

    comments = await list_store.find_collection(book_list.id, SubCollection.COMMENTS)
    assert doomed.id not in {c.id for c in comments}
    assert len(comments) == len(others) + 1
    assert (sibling.id, sibling.text) in {(c.id, c.text) for c in comments}
    assert {(c.user_id, c.text) for c in comments if c.id != sibling.id} == {
        (r.user_id, f"hi from {r.user_id}") for r in others
    }
