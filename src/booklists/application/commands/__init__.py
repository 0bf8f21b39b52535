"""Command layer - write operations that mutate state.

Commands are organized by domain:
- lists: list creation and deletion, books, likes and comments
- user: profile entries and account deletion
"""

from booklists.application.commands.lists import (
    AddBookCommand,
    AddCommentCommand,
    CreateListCommand,
    DeleteCommentCommand,
    DeleteListCommand,
    LikeListCommand,
    UnlikeListCommand,
)
from booklists.application.commands.user import (
    AddAboutEntryCommand,
    DeleteAccountCommand,
    RemoveAboutEntryCommand,
)

__all__ = [
    # Lists
    "AddBookCommand",
    "AddCommentCommand",
    "CreateListCommand",
    "DeleteCommentCommand",
    "DeleteListCommand",
    "LikeListCommand",
    "UnlikeListCommand",
    # User
    "AddAboutEntryCommand",
    "DeleteAccountCommand",
    "RemoveAboutEntryCommand",
]
