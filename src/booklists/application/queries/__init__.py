"""Query layer - read operations that never mutate state."""

from booklists.application.queries.lists import (
    GetListQuery,
    ListListsQuery,
    ListsByOwnerQuery,
)
from booklists.application.queries.user import (
    GetCurrentUserQuery,
    GetUserQuery,
    ListUsersQuery,
)

__all__ = [
    "GetCurrentUserQuery",
    "GetListQuery",
    "GetUserQuery",
    "ListListsQuery",
    "ListUsersQuery",
    "ListsByOwnerQuery",
]
