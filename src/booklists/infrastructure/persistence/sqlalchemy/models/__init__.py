"""SQLAlchemy models. Importing this package registers every table."""

from booklists.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from booklists.infrastructure.persistence.sqlalchemy.models.lists import (
    BookEntryModel,
    BookListModel,
    CommentModel,
    LikeModel,
)
from booklists.infrastructure.persistence.sqlalchemy.models.user import (
    AboutEntryModel,
    UserModel,
)

__all__ = [
    "AboutEntryModel",
    "Base",
    "BookEntryModel",
    "BookListModel",
    "CommentModel",
    "LikeModel",
    "TimestampMixin",
    "UserModel",
]
