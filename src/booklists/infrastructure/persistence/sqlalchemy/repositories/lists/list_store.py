"""SQLAlchemy implementation of the ListStore.

Unlike the session-scoped repositories, the store owns its engine and runs
every primitive in its own short transaction, bounded by a timeout. Each
sub-collection mutation is a single statement (INSERT ... SELECT or
DELETE ... WHERE) so the database serializes concurrent writers to the
same list; nothing is read into Python and written back.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import delete, exists, insert, literal, select
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from booklists.domain.lists import (
    BookEntry,
    BookList,
    Comment,
    Like,
    ListNotFoundError,
    ListStore,
    Match,
    SubCollection,
    SubCollectionItem,
)
from booklists.domain.shared.exceptions import StoreUnavailableError
from booklists.domain.shared.time import ensure_tz_aware
from booklists.infrastructure.persistence.sqlalchemy.models import (
    Base,
    BookEntryModel,
    BookListModel,
    CommentModel,
    LikeModel,
)
from booklists_auth.persistence.sqlalchemy import AuthBase

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TIMEOUT_SECONDS = 5.0

_MODELS: dict[SubCollection, type[Base]] = {
    SubCollection.BOOKS: BookEntryModel,
    SubCollection.LIKES: LikeModel,
    SubCollection.COMMENTS: CommentModel,
}

# Fields a match predicate may name, per collection
_MATCHABLE_FIELDS: dict[SubCollection, frozenset[str]] = {
    SubCollection.BOOKS: frozenset({"title", "name", "user_id"}),
    SubCollection.LIKES: frozenset({"user_id"}),
    SubCollection.COMMENTS: frozenset({"id", "text", "name", "user_id"}),
}

_ITEM_TYPES: dict[SubCollection, type] = {
    SubCollection.BOOKS: BookEntry,
    SubCollection.LIKES: Like,
    SubCollection.COMMENTS: Comment,
}


class SQLAlchemyListStore(ListStore):
    """ListStore on an async SQLAlchemy engine.

    Parameters
    ----------
    engine
        Async engine (asyncpg or aiosqlite). The store disposes it on close.
    timeout
        Upper bound in seconds for any single store call. Exceeding it
        cancels the call, rolls back its transaction and raises
        StoreUnavailableError.
    """

    def __init__(self, engine: AsyncEngine, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        if timeout <= 0:
            msg = "Store timeout must be positive"
            raise ValueError(msg)
        self._engine = engine
        self._timeout = timeout
        self._session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def open(self) -> None:
        """Create missing tables and verify connectivity."""
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
                await conn.run_sync(AuthBase.metadata.create_all)
                await conn.execute(select(literal(1)))
        except (OperationalError, InterfaceError, OSError) as e:
            logger.error("List store could not connect: %s", e)
            raise StoreUnavailableError(details={"reason": str(e)}) from e
        logger.info("List store opened (timeout=%.1fs)", self._timeout)

    async def close(self) -> None:
        await self._engine.dispose()
        logger.info("List store closed")

    async def _run(self, operation: Callable[[AsyncSession], Awaitable[T]]) -> T:
        """Run one primitive in its own transaction under the timeout."""

        async def _in_transaction() -> T:
            async with self._session_maker() as session, session.begin():
                return await operation(session)

        try:
            return await asyncio.wait_for(_in_transaction(), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            logger.warning("List store call timed out after %.1fs", self._timeout)
            raise StoreUnavailableError(
                "The data store did not respond in time",
            ) from e
        except (OperationalError, InterfaceError) as e:
            logger.warning("List store unavailable: %s", e)
            raise StoreUnavailableError(details={"reason": str(e)}) from e

    # -------------------------------------------------------------------------
    # Whole-aggregate operations
    # -------------------------------------------------------------------------

    async def find_by_id(self, list_id: UUID) -> Optional[BookList]:
        async def _op(session: AsyncSession) -> Optional[BookList]:
            stmt = self._aggregate_query().where(BookListModel.id == list_id)
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            return self._map_to_domain(model) if model else None

        return await self._run(_op)

    async def find_all(self) -> Sequence[BookList]:
        async def _op(session: AsyncSession) -> list[BookList]:
            stmt = self._aggregate_query().order_by(BookListModel.created_at.desc())
            result = await session.execute(stmt)
            return [self._map_to_domain(m) for m in result.scalars().all()]

        return await self._run(_op)

    async def find_by_owner(self, owner_id: UUID) -> Sequence[BookList]:
        async def _op(session: AsyncSession) -> list[BookList]:
            stmt = (
                self._aggregate_query()
                .where(BookListModel.owner_id == owner_id)
                .order_by(BookListModel.created_at.desc())
            )
            result = await session.execute(stmt)
            return [self._map_to_domain(m) for m in result.scalars().all()]

        return await self._run(_op)

    async def create(self, book_list: BookList) -> None:
        async def _op(session: AsyncSession) -> None:
            session.add(
                BookListModel(
                    id=book_list.id,
                    name=book_list.name,
                    owner_id=book_list.owner_id,
                    created_at=book_list.created_at,
                ),
            )
            await session.flush()
            # Oldest first so that seq order matches the aggregate's order
            children = [
                _MODELS[collection](
                    list_id=book_list.id,
                    **self._row_values(collection, item),
                )
                for collection, items in (
                    (SubCollection.BOOKS, book_list.books),
                    (SubCollection.LIKES, book_list.likes),
                    (SubCollection.COMMENTS, book_list.comments),
                )
                for item in reversed(items)
            ]
            session.add_all(children)
            await session.flush()

        await self._run(_op)
        logger.info("Created list %s (%r)", book_list.id, book_list.name)

    async def delete(self, list_id: UUID) -> bool:
        async def _op(session: AsyncSession) -> bool:
            # Children first; SQLite does not enforce ON DELETE CASCADE
            # unless foreign keys are switched on per connection.
            for model in _MODELS.values():
                await session.execute(
                    delete(model.__table__).where(model.__table__.c.list_id == list_id),
                )
            result = await session.execute(
                delete(BookListModel.__table__).where(
                    BookListModel.__table__.c.id == list_id,
                ),
            )
            return result.rowcount > 0

        deleted = await self._run(_op)
        if deleted:
            logger.info("Deleted list %s", list_id)
        return deleted

    async def delete_by_owner(self, owner_id: UUID) -> int:
        async def _op(session: AsyncSession) -> int:
            owned = select(BookListModel.id).where(BookListModel.owner_id == owner_id)
            for model in _MODELS.values():
                await session.execute(
                    delete(model.__table__).where(
                        model.__table__.c.list_id.in_(owned),
                    ),
                )
            result = await session.execute(
                delete(BookListModel.__table__).where(
                    BookListModel.__table__.c.owner_id == owner_id,
                ),
            )
            return result.rowcount

        count = await self._run(_op)
        logger.info("Deleted %d list(s) owned by %s", count, owner_id)
        return count

    # -------------------------------------------------------------------------
    # Sub-collection primitives
    # -------------------------------------------------------------------------

    async def find_collection(
        self,
        list_id: UUID,
        collection: SubCollection,
    ) -> tuple[SubCollectionItem, ...]:
        model = _MODELS[collection]

        async def _op(session: AsyncSession) -> tuple[SubCollectionItem, ...]:
            stmt = (
                select(model)
                .where(model.list_id == list_id)
                .order_by(model.seq.desc())
            )
            rows = (await session.execute(stmt)).scalars().all()
            if not rows:
                await self._ensure_list_exists(session, list_id)
            return tuple(self._map_item(collection, row) for row in rows)

        return await self._run(_op)

    async def prepend(
        self,
        list_id: UUID,
        collection: SubCollection,
        item: SubCollectionItem,
    ) -> None:
        self._check_item(collection, item)

        async def _op(session: AsyncSession) -> None:
            stmt = self._insert_from_list(list_id, collection, item)
            result = await session.execute(stmt)
            if result.rowcount == 0:
                raise ListNotFoundError(list_id)

        await self._run(_op)
        logger.debug("Prepended %s item to list %s", collection.value, list_id)

    async def append_if_absent(
        self,
        list_id: UUID,
        collection: SubCollection,
        item: SubCollectionItem,
        match: Match,
    ) -> bool:
        self._check_item(collection, item)
        model = _MODELS[collection]
        conditions = self._match_conditions(collection, match)

        async def _op(session: AsyncSession) -> bool:
            already_present = exists(
                select(model.seq).where(model.list_id == list_id, *conditions),
            )
            stmt = self._insert_from_list(
                list_id,
                collection,
                item,
                extra_where=~already_present,
            )
            result = await session.execute(stmt)
            if result.rowcount == 0:
                await self._ensure_list_exists(session, list_id)
                return False
            return True

        try:
            inserted = await self._run(_op)
        except IntegrityError:
            # Either a concurrent duplicate hit the unique constraint or the
            # list was deleted underneath us (foreign key); only the first
            # is "already present".
            await self._run(lambda session: self._ensure_list_exists(session, list_id))
            logger.debug(
                "Concurrent duplicate rejected on %s of list %s",
                collection.value,
                list_id,
            )
            return False
        return inserted

    async def remove_where(
        self,
        list_id: UUID,
        collection: SubCollection,
        match: Match,
    ) -> int:
        table = _MODELS[collection].__table__
        conditions = [
            table.c[field] == value
            for field, value in self._validated_match(collection, match).items()
        ]

        async def _op(session: AsyncSession) -> int:
            result = await session.execute(
                delete(table).where(table.c.list_id == list_id, *conditions),
            )
            if result.rowcount == 0:
                await self._ensure_list_exists(session, list_id)
            return result.rowcount

        removed = await self._run(_op)
        logger.debug(
            "Removed %d %s item(s) from list %s",
            removed,
            collection.value,
            list_id,
        )
        return removed

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _aggregate_query():
        return select(BookListModel).options(
            selectinload(BookListModel.books),
            selectinload(BookListModel.likes),
            selectinload(BookListModel.comments),
        )

    @staticmethod
    async def _ensure_list_exists(session: AsyncSession, list_id: UUID) -> None:
        stmt = select(BookListModel.id).where(BookListModel.id == list_id)
        if (await session.execute(stmt)).scalar_one_or_none() is None:
            raise ListNotFoundError(list_id)

    def _insert_from_list(
        self,
        list_id: UUID,
        collection: SubCollection,
        item: SubCollectionItem,
        extra_where: Any = None,
    ):
        """INSERT INTO <child> SELECT <item values> FROM book_lists WHERE id = ?

        Inserts nothing when the list does not exist, which the caller
        detects through rowcount.
        """
        table = _MODELS[collection].__table__
        values = self._row_values(collection, item)
        columns = ["list_id", *values]
        source = select(
            BookListModel.__table__.c.id,
            *(
                literal(value, table.c[name].type).label(name)
                for name, value in values.items()
            ),
        ).where(BookListModel.__table__.c.id == list_id)
        if extra_where is not None:
            source = source.where(extra_where)
        return insert(table).from_select(columns, source)

    @staticmethod
    def _check_item(collection: SubCollection, item: SubCollectionItem) -> None:
        expected = _ITEM_TYPES[collection]
        if not isinstance(item, expected):
            msg = (
                f"{collection.value} expects {expected.__name__}, "
                f"got {type(item).__name__}"
            )
            raise TypeError(msg)

    @staticmethod
    def _validated_match(collection: SubCollection, match: Match) -> Match:
        if not match:
            msg = "Match predicate must name at least one field"
            raise ValueError(msg)
        unknown = set(match) - _MATCHABLE_FIELDS[collection]
        if unknown:
            msg = f"Cannot match {collection.value} on: {', '.join(sorted(unknown))}"
            raise ValueError(msg)
        return match

    def _match_conditions(self, collection: SubCollection, match: Match) -> list:
        model = _MODELS[collection]
        return [
            getattr(model, field) == value
            for field, value in self._validated_match(collection, match).items()
        ]

    @staticmethod
    def _row_values(
        collection: SubCollection,
        item: SubCollectionItem,
    ) -> dict[str, Any]:
        if collection is SubCollection.BOOKS:
            return {
                "title": item.title,
                "name": item.name,
                "user_id": item.user_id,
                "created_at": item.created_at,
            }
        if collection is SubCollection.LIKES:
            return {"user_id": item.user_id, "created_at": item.created_at}
        return {
            "id": item.id,
            "text": item.text,
            "name": item.name,
            "user_id": item.user_id,
            "created_at": item.created_at,
        }

    @staticmethod
    def _map_item(collection: SubCollection, row: Any) -> SubCollectionItem:
        created_at = ensure_tz_aware(row.created_at)
        if collection is SubCollection.BOOKS:
            return BookEntry(
                title=row.title,
                name=row.name,
                user_id=row.user_id,
                created_at=created_at,
            )
        if collection is SubCollection.LIKES:
            return Like(user_id=row.user_id, created_at=created_at)
        return Comment(
            id=row.id,
            text=row.text,
            name=row.name,
            user_id=row.user_id,
            created_at=created_at,
        )

    def _map_to_domain(self, model: BookListModel) -> BookList:
        return BookList.reconstitute(
            id=model.id,
            name=model.name,
            owner_id=model.owner_id,
            created_at=ensure_tz_aware(model.created_at),
            books=[self._map_item(SubCollection.BOOKS, b) for b in model.books],
            likes=[self._map_item(SubCollection.LIKES, lk) for lk in model.likes],
            comments=[
                self._map_item(SubCollection.COMMENTS, c) for c in model.comments
            ],
        )
