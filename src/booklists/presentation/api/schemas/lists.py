"""Schemas for book lists and their nested collections."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from booklists.domain.lists import BookEntry, BookList, Comment, Like

# =============================================================================
# Requests
# =============================================================================


class CreateListRequest(BaseModel):
    """Request schema for creating a list."""

    name: str = Field(..., max_length=200, description="Name of the list")

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Sci-Fi"}},
    )


class AddBookRequest(BaseModel):
    title: str = Field(..., max_length=500, description="Title of the book to add")

    model_config = ConfigDict(
        json_schema_extra={"example": {"title": "Dune"}},
    )


class AddCommentRequest(BaseModel):
    text: str = Field(..., description="Comment text")

    model_config = ConfigDict(
        json_schema_extra={"example": {"text": "Great picks!"}},
    )


# =============================================================================
# Responses
# =============================================================================


class BookEntryResponse(BaseModel):
    """A book on a list, with the name of the user who added it."""

    title: str
    name: str = Field(..., description="Display name of the user who added it")
    user_id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LikeResponse(BaseModel):
    user_id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentResponse(BaseModel):
    id: UUID = Field(..., description="Comment id, used to delete it")
    text: str
    name: str = Field(..., description="Display name of the author")
    user_id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ListResponse(BaseModel):
    """A list with all nested collections, newest entries first."""

    id: UUID
    name: str
    owner_id: UUID
    created_at: datetime
    books: list[BookEntryResponse]
    likes: list[LikeResponse]
    like_count: int
    comments: list[CommentResponse]

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "6f1f3c4e-1d2b-4b8e-9a55-2c1f0f7e8a10",
                "name": "Sci-Fi",
                "owner_id": "0b8f0a4e-7a4c-4a53-8d5b-3d9a5f6e2c11",
                "created_at": "2024-05-01T12:00:00Z",
                "books": [
                    {
                        "title": "Dune",
                        "name": "alice",
                        "user_id": "0b8f0a4e-7a4c-4a53-8d5b-3d9a5f6e2c11",
                        "created_at": "2024-05-01T12:01:00Z",
                    },
                ],
                "likes": [],
                "like_count": 0,
                "comments": [],
            },
        },
    )

    @classmethod
    def from_domain(cls, book_list: BookList) -> "ListResponse":
        return cls.model_validate(book_list)


def book_entries(entries: tuple[BookEntry, ...]) -> list[BookEntryResponse]:
    return [BookEntryResponse.model_validate(entry) for entry in entries]


def likes(items: tuple[Like, ...]) -> list[LikeResponse]:
    return [LikeResponse.model_validate(like) for like in items]


def comments(items: tuple[Comment, ...]) -> list[CommentResponse]:
    return [CommentResponse.model_validate(comment) for comment in items]
