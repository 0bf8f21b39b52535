from booklists.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from booklists.infrastructure.persistence.sqlalchemy.repositories.lists import (
    SQLAlchemyListStore,
)
from booklists.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "SQLAlchemyListStore",
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
]
