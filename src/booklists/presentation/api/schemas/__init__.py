"""Pydantic schemas for API request/response models."""

from booklists.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    TokenResponse,
)
from booklists.presentation.api.schemas.common import ErrorResponse, HealthResponse
from booklists.presentation.api.schemas.lists import (
    AddBookRequest,
    AddCommentRequest,
    BookEntryResponse,
    CommentResponse,
    CreateListRequest,
    LikeResponse,
    ListResponse,
)
from booklists.presentation.api.schemas.users import (
    AboutEntryResponse,
    AboutRequest,
    AccountDeletedResponse,
    UserResponse,
)

__all__ = [
    # Auth
    "AuthResponse",
    "LoginRequest",
    "RefreshRequest",
    "RegisterRequest",
    "TokenResponse",
    # Common
    "ErrorResponse",
    "HealthResponse",
    # Lists
    "AddBookRequest",
    "AddCommentRequest",
    "BookEntryResponse",
    "CommentResponse",
    "CreateListRequest",
    "LikeResponse",
    "ListResponse",
    # Users
    "AboutEntryResponse",
    "AboutRequest",
    "AccountDeletedResponse",
    "UserResponse",
]
