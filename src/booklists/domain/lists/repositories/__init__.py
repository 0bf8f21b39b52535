from booklists.domain.lists.repositories.list_store import (
    ListStore,
    Match,
    SubCollectionItem,
)

__all__ = ["ListStore", "Match", "SubCollectionItem"]
