from booklists.application.queries.user.user_queries import (
    GetCurrentUserQuery,
    GetUserQuery,
    ListUsersQuery,
)

__all__ = ["GetCurrentUserQuery", "GetUserQuery", "ListUsersQuery"]
