from booklists.infrastructure.persistence.sqlalchemy.repositories.lists.list_store import (  # NOQA: E501
    DEFAULT_TIMEOUT_SECONDS,
    SQLAlchemyListStore,
)

__all__ = ["DEFAULT_TIMEOUT_SECONDS", "SQLAlchemyListStore"]
