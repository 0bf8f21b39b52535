from booklists.application.commands.lists.add_book_command import AddBookCommand
from booklists.application.commands.lists.comment_commands import (
    AddCommentCommand,
    DeleteCommentCommand,
)
from booklists.application.commands.lists.create_list_command import (
    CreateListCommand,
)
from booklists.application.commands.lists.delete_list_command import (
    DeleteListCommand,
)
from booklists.application.commands.lists.like_list_command import (
    LikeListCommand,
    UnlikeListCommand,
)

__all__ = [
    "AddBookCommand",
    "AddCommentCommand",
    "CreateListCommand",
    "DeleteCommentCommand",
    "DeleteListCommand",
    "LikeListCommand",
    "UnlikeListCommand",
]
