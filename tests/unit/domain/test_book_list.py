"""Unit tests for the BookList aggregate and its value objects."""

from datetime import timedelta
from uuid import UUID, uuid4

import pytest

from booklists.domain.lists import BookEntry, BookList, Comment, Like
from booklists.domain.shared.exceptions import ErrorCode, ValidationError
from booklists.domain.shared.time import utc_now

OWNER_ID = UUID("12345678-1234-5678-1234-567812345678")
OTHER_ID = UUID("00000000-0000-0000-0000-000000000001")


class TestBookListCreate:
    def test_create_sets_owner_and_empty_collections(self):
        book_list = BookList.create(name="Sci-Fi", owner_id=OWNER_ID)

        assert book_list.name == "Sci-Fi"
        assert book_list.owner_id == OWNER_ID
        assert isinstance(book_list.id, UUID)
        assert book_list.books == ()
        assert book_list.likes == ()
        assert book_list.comments == ()
        assert book_list.like_count == 0
        assert book_list.created_at.tzinfo is not None

    def test_name_is_stripped(self):
        book_list = BookList.create(name="  Classics  ", owner_id=OWNER_ID)
        assert book_list.name == "Classics"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_name_is_rejected(self, name):
        with pytest.raises(ValidationError, match="Name is required") as exc_info:
            BookList.create(name=name, owner_id=OWNER_ID)
        assert exc_info.value.code == ErrorCode.VALIDATION_ERROR

    def test_overlong_name_is_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            BookList.create(name="x" * 201, owner_id=OWNER_ID)

    def test_ids_are_unique(self):
        first = BookList.create(name="A", owner_id=OWNER_ID)
        second = BookList.create(name="A", owner_id=OWNER_ID)
        assert first.id != second.id
        assert first != second


class TestBookListQueries:
    def _list_with_children(self) -> BookList:
        comment = Comment.create(text="Nice", name="bob", user_id=OTHER_ID)
        return BookList.reconstitute(
            id=uuid4(),
            name="Sci-Fi",
            owner_id=OWNER_ID,
            created_at=utc_now() - timedelta(days=1),
            books=[BookEntry.create(title="Dune", name="alice", user_id=OWNER_ID)],
            likes=[Like.create(OTHER_ID)],
            comments=[comment],
        )

    def test_is_owned_by(self):
        book_list = self._list_with_children()
        assert book_list.is_owned_by(OWNER_ID)
        assert not book_list.is_owned_by(OTHER_ID)

    def test_like_count(self):
        assert self._list_with_children().like_count == 1

    def test_find_comment(self):
        book_list = self._list_with_children()
        comment = book_list.comments[0]

        assert book_list.find_comment(comment.id) is comment
        assert book_list.find_comment(uuid4()) is None

    def test_equality_is_by_id(self):
        book_list = self._list_with_children()
        same = BookList.reconstitute(
            id=book_list.id,
            name="Renamed",
            owner_id=OTHER_ID,
            created_at=book_list.created_at,
            books=(),
            likes=(),
            comments=(),
        )
        assert book_list == same
        assert hash(book_list) == hash(same)


class TestSubCollectionItems:
    def test_book_entry_requires_title(self):
        with pytest.raises(ValidationError, match="Title is required"):
            BookEntry.create(title="  ", name="alice", user_id=OWNER_ID)

    def test_book_entry_title_length(self):
        assert len(BookEntry.create("x" * 500, "alice", OWNER_ID).title) == 500
        with pytest.raises(ValidationError, match="cannot exceed 500") as exc:
            BookEntry.create(title="x" * 501, name="alice", user_id=OWNER_ID)
        assert exc.value.code == ErrorCode.VALIDATION_ERROR

    def test_book_entry_keeps_adder(self):
        entry = BookEntry.create(title=" Dune ", name="alice", user_id=OWNER_ID)
        assert entry.title == "Dune"
        assert entry.name == "alice"
        assert entry.user_id == OWNER_ID

    def test_duplicate_titles_are_distinct_entries(self):
        first = BookEntry.create(title="Dune", name="alice", user_id=OWNER_ID)
        second = BookEntry.create(title="Dune", name="alice", user_id=OWNER_ID)
        assert first.title == second.title

    def test_comment_gets_fresh_id(self):
        first = Comment.create(text="Hi", name="bob", user_id=OTHER_ID)
        second = Comment.create(text="Hi", name="bob", user_id=OTHER_ID)
        assert first.id != second.id

    def test_comment_requires_text(self):
        with pytest.raises(ValidationError, match="Text is required"):
            Comment.create(text="", name="bob", user_id=OTHER_ID)

    def test_comment_authorship(self):
        comment = Comment.create(text="Hi", name="bob", user_id=OTHER_ID)
        assert comment.is_authored_by(OTHER_ID)
        assert not comment.is_authored_by(OWNER_ID)

    def test_items_are_immutable(self):
        like = Like.create(OTHER_ID)
        with pytest.raises(AttributeError):
            like.user_id = OWNER_ID  # type: ignore[misc]
