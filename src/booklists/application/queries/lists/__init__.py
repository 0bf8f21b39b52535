from booklists.application.queries.lists.list_queries import (
    GetListQuery,
    ListListsQuery,
    ListsByOwnerQuery,
)

__all__ = ["GetListQuery", "ListListsQuery", "ListsByOwnerQuery"]
