"""Lists router: book lists, their books, likes and comments."""

import logging

from fastapi import APIRouter, status

from booklists.application.commands import (
    AddBookCommand,
    AddCommentCommand,
    CreateListCommand,
    DeleteCommentCommand,
    DeleteListCommand,
    LikeListCommand,
    UnlikeListCommand,
)
from booklists.application.queries import (
    GetListQuery,
    ListListsQuery,
    ListsByOwnerQuery,
)
from booklists.presentation.api.dependencies import CurrentActor, RepoFactory
from booklists.presentation.api.schemas.common import error_responses
from booklists.presentation.api.schemas.lists import (
    AddBookRequest,
    AddCommentRequest,
    BookEntryResponse,
    CommentResponse,
    CreateListRequest,
    LikeResponse,
    ListResponse,
    book_entries,
    comments,
    likes,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# -----------------------------------------------------------------------------
# Lists
# -----------------------------------------------------------------------------


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create list",
    responses=error_responses(400, 401, 503),
)
async def create_list(
    request: CreateListRequest,
    actor: CurrentActor,
    factory: RepoFactory,
) -> ListResponse:
    """Create an empty list owned by the caller."""
    command = CreateListCommand.from_factory(factory)
    book_list = await command.execute(actor, name=request.name)
    return ListResponse.from_domain(book_list)


@router.get(
    "",
    summary="List all lists",
    responses=error_responses(503),
)
async def list_lists(factory: RepoFactory) -> list[ListResponse]:
    """All lists, most recently created first."""
    query = ListListsQuery.from_factory(factory)
    return [ListResponse.from_domain(book_list) for book_list in await query.execute()]


@router.get(
    "/me",
    summary="List my lists",
    responses=error_responses(401, 503),
)
async def list_my_lists(
    actor: CurrentActor,
    factory: RepoFactory,
) -> list[ListResponse]:
    query = ListsByOwnerQuery.from_factory(factory)
    result = await query.execute(actor.user_id)
    return [ListResponse.from_domain(book_list) for book_list in result]


@router.get(
    "/owner/{user_id}",
    summary="List a user's lists",
    responses=error_responses(404, 503),
)
async def list_lists_by_owner(user_id: str, factory: RepoFactory) -> list[ListResponse]:
    query = ListsByOwnerQuery.from_factory(factory)
    result = await query.execute(user_id)
    return [ListResponse.from_domain(book_list) for book_list in result]


@router.get(
    "/{list_id}",
    summary="Get list",
    responses=error_responses(404, 503),
)
async def get_list(list_id: str, factory: RepoFactory) -> ListResponse:
    query = GetListQuery.from_factory(factory)
    return ListResponse.from_domain(await query.execute(list_id))


@router.delete(
    "/{list_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete list",
    responses=error_responses(401, 403, 404, 503),
)
async def delete_list(
    list_id: str,
    actor: CurrentActor,
    factory: RepoFactory,
) -> None:
    """
    Delete a list with all its books, likes and comments.

    Only the owner may delete a list.
    """
    command = DeleteListCommand.from_factory(factory)
    await command.execute(actor, list_id)


# -----------------------------------------------------------------------------
# Books
# -----------------------------------------------------------------------------


@router.post(
    "/{list_id}/books",
    status_code=status.HTTP_201_CREATED,
    summary="Add book",
    responses=error_responses(400, 401, 404, 503),
)
async def add_book(
    list_id: str,
    request: AddBookRequest,
    actor: CurrentActor,
    factory: RepoFactory,
) -> list[BookEntryResponse]:
    """Add a book to the top of the list and return all of its books."""
    command = AddBookCommand.from_factory(factory)
    result = await command.execute(actor, list_id, title=request.title)
    return book_entries(result)


# -----------------------------------------------------------------------------
# Likes
# -----------------------------------------------------------------------------


@router.put(
    "/{list_id}/likes",
    summary="Like list",
    responses=error_responses(400, 401, 404, 503),
)
async def like_list(
    list_id: str,
    actor: CurrentActor,
    factory: RepoFactory,
) -> list[LikeResponse]:
    """Like a list. Liking the same list twice is rejected with 400."""
    command = LikeListCommand.from_factory(factory)
    return likes(await command.execute(actor, list_id))


@router.delete(
    "/{list_id}/likes",
    summary="Unlike list",
    responses=error_responses(400, 401, 404, 503),
)
async def unlike_list(
    list_id: str,
    actor: CurrentActor,
    factory: RepoFactory,
) -> list[LikeResponse]:
    command = UnlikeListCommand.from_factory(factory)
    return likes(await command.execute(actor, list_id))


# -----------------------------------------------------------------------------
# Comments
# -----------------------------------------------------------------------------


@router.post(
    "/{list_id}/comments",
    status_code=status.HTTP_201_CREATED,
    summary="Add comment",
    responses=error_responses(400, 401, 404, 503),
)
async def add_comment(
    list_id: str,
    request: AddCommentRequest,
    actor: CurrentActor,
    factory: RepoFactory,
) -> list[CommentResponse]:
    """
    Comment on a list.

    Returns all comments, newest first; the new comment is the first one.
    """
    command = AddCommentCommand.from_factory(factory)
    result = await command.execute(actor, list_id, text=request.text)
    return comments(result)


@router.delete(
    "/{list_id}/comments/{comment_id}",
    summary="Delete comment",
    responses=error_responses(401, 403, 404, 503),
)
async def delete_comment(
    list_id: str,
    comment_id: str,
    actor: CurrentActor,
    factory: RepoFactory,
) -> list[CommentResponse]:
    """Delete one of your own comments and return the remaining ones."""
    command = DeleteCommentCommand.from_factory(factory)
    result = await command.execute(actor, list_id, comment_id)
    return comments(result)
