from booklists.infrastructure.persistence.sqlalchemy.models.lists.book_list_model import (  # NOQA: E501
    BookListModel,
)
from booklists.infrastructure.persistence.sqlalchemy.models.lists.sub_collection_models import (  # NOQA: E501
    BookEntryModel,
    CommentModel,
    LikeModel,
)

__all__ = ["BookEntryModel", "BookListModel", "CommentModel", "LikeModel"]
