"""Lists domain - book lists with likes and comments.

This domain handles:
- BookList aggregate (name, owner, creation time)
- Nested collections: book entries, likes, comments
- The ListStore port with atomic, field-scoped primitives

Design notes:
- Sub-collection items are immutable value objects
- Only comments carry an id; books and likes are positional / keyed by user
- At most one like per user per list
"""

from booklists.domain.lists.aggregates import BookList
from booklists.domain.lists.exceptions import (
    AlreadyLikedError,
    CommentNotFoundError,
    ListNotFoundError,
    NotLikedError,
)
from booklists.domain.lists.repositories import (
    ListStore,
    Match,
    SubCollectionItem,
)
from booklists.domain.lists.value_objects import (
    BookEntry,
    Comment,
    Like,
    ListAction,
    SubCollection,
)

__all__ = [
    "AlreadyLikedError",
    "BookEntry",
    "BookList",
    "Comment",
    "CommentNotFoundError",
    "Like",
    "ListAction",
    "ListNotFoundError",
    "ListStore",
    "Match",
    "NotLikedError",
    "SubCollection",
    "SubCollectionItem",
]
