from booklists.domain.lists.value_objects.book_entry import BookEntry
from booklists.domain.lists.value_objects.comment import Comment
from booklists.domain.lists.value_objects.like import Like
from booklists.domain.lists.value_objects.sub_collection import (
    ListAction,
    SubCollection,
)

__all__ = [
    "BookEntry",
    "Comment",
    "Like",
    "ListAction",
    "SubCollection",
]
