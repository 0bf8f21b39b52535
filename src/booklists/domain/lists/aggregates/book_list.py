from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID, uuid4

from booklists.domain.lists.value_objects import BookEntry, Comment, Like
from booklists.domain.shared.exceptions import ValidationError
from booklists.domain.shared.time import utc_now

MAX_NAME_LENGTH = 200


class BookList:
    """
    List aggregate root.

    Owns three sub-collections (books, likes, comments) that are mutated
    one item at a time by the store, never by saving the whole aggregate.
    Instances are snapshots used for validation, authorization and
    responses.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        owner_id: UUID,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        books: Sequence[BookEntry] = (),
        likes: Sequence[Like] = (),
        comments: Sequence[Comment] = (),
    ):
        self._name = self._validate_name(name)
        self._owner_id = owner_id
        self._id = id if id is not None else uuid4()
        self._created_at = created_at or utc_now()
        self._books = tuple(books)
        self._likes = tuple(likes)
        self._comments = tuple(comments)

    @staticmethod
    def _validate_name(name: str) -> str:
        name = (name or "").strip()
        if not name:
            msg = "Name is required"
            raise ValidationError(msg, details={"field": "name"})
        if len(name) > MAX_NAME_LENGTH:
            msg = f"Name cannot exceed {MAX_NAME_LENGTH} characters"
            raise ValidationError(msg, details={"field": "name"})
        return name

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def owner_id(self) -> UUID:
        return self._owner_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def books(self) -> tuple[BookEntry, ...]:
        """Book entries, newest first."""
        return self._books

    @property
    def likes(self) -> tuple[Like, ...]:
        return self._likes

    @property
    def comments(self) -> tuple[Comment, ...]:
        """Comments, newest first."""
        return self._comments

    @property
    def like_count(self) -> int:
        return len(self._likes)

    def is_owned_by(self, user_id: UUID) -> bool:
        return self._owner_id == user_id

    def find_comment(self, comment_id: UUID) -> Optional[Comment]:
        for comment in self._comments:
            if comment.id == comment_id:
                return comment
        return None

    @classmethod
    def create(cls, name: str, owner_id: UUID) -> "BookList":
        return cls(name=name, owner_id=owner_id)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        owner_id: UUID,
        created_at: datetime,
        books: Sequence[BookEntry],
        likes: Sequence[Like],
        comments: Sequence[Comment],
    ) -> "BookList":
        return cls(
            id=id,
            name=name,
            owner_id=owner_id,
            created_at=created_at,
            books=books,
            likes=likes,
            comments=comments,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BookList):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"BookList(id={self._id}, name={self._name!r})"
