from enum import Enum


class SubCollection(str, Enum):
    """The independently mutable collections nested in a list."""

    BOOKS = "books"
    LIKES = "likes"
    COMMENTS = "comments"


class ListAction(str, Enum):
    """Mutations the authorization policy decides on."""

    ADD_BOOK = "add_book"
    LIKE = "like"
    UNLIKE = "unlike"
    ADD_COMMENT = "add_comment"
    DELETE_COMMENT = "delete_comment"
    DELETE_LIST = "delete_list"
