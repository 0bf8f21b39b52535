"""SQLAlchemy model for the BookList aggregate root."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booklists.domain.shared.time import utc_now
from booklists.infrastructure.persistence.sqlalchemy.models.base import Base

if TYPE_CHECKING:
    from booklists.infrastructure.persistence.sqlalchemy.models.lists.sub_collection_models import (  # NOQA: E501
        BookEntryModel,
        CommentModel,
        LikeModel,
    )


class BookListModel(Base):
    """
    Root row of a list.

    owner_id references a user by identity only; no foreign key so lists
    can be stored and tested without the users table being populated.

    Table: book_lists
    """

    __tablename__ = "book_lists"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    owner_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        index=True,
    )

    books: Mapped[list[BookEntryModel]] = relationship(
        order_by="BookEntryModel.seq.desc()",
        passive_deletes=True,
    )
    likes: Mapped[list[LikeModel]] = relationship(
        order_by="LikeModel.seq.desc()",
        passive_deletes=True,
    )
    comments: Mapped[list[CommentModel]] = relationship(
        order_by="CommentModel.seq.desc()",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<BookListModel(id={self.id}, name={self.name!r})>"
