"""SQLAlchemy models for the nested collections of a list.

Every row carries an autoincrement ``seq``; newest-first ordering is
``seq DESC``, so prepending is a plain insert.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from booklists.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    created_at_column,
)


class BookEntryModel(Base):
    """Table: book_list_books"""

    __tablename__ = "book_list_books"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    list_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("book_lists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    created_at: Mapped[datetime] = created_at_column()


class LikeModel(Base):
    """Table: book_list_likes. One row per (list, user)."""

    __tablename__ = "book_list_likes"
    __table_args__ = (
        UniqueConstraint("list_id", "user_id", name="uq_book_list_likes_list_user"),
    )

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    list_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("book_lists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    created_at: Mapped[datetime] = created_at_column()


class CommentModel(Base):
    """Table: book_list_comments"""

    __tablename__ = "book_list_comments"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[UUID] = mapped_column(Uuid, unique=True, nullable=False)
    list_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("book_lists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    created_at: Mapped[datetime] = created_at_column()
