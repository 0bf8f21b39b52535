"""Users and their about entries in SQL.

Profile fields go through the ORM. About entries are written with single
Core statements so that two concurrent additions never overwrite each
other.
"""

import logging
from typing import Optional, Sequence, Union
from uuid import UUID

from sqlalchemy import Select, delete, insert, literal, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from booklists.domain.shared.time import ensure_tz_aware, utc_now
from booklists.domain.user import (
    AboutEntry,
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from booklists.infrastructure.persistence.sqlalchemy.models.user import (
    AboutEntryModel,
    UserModel,
)

logger = logging.getLogger(__name__)

_users = UserModel.__table__
_about = AboutEntryModel.__table__


def _select_users() -> Select:
    # populate_existing: about rows change behind the identity map's back
    return (
        select(UserModel)
        .options(selectinload(UserModel.about))
        .execution_options(populate_existing=True)
    )


def _to_user(model: UserModel) -> User:
    return User.reconstitute(
        id=model.id,
        username=model.username,
        email=model.email,
        about=[
            AboutEntry(
                id=row.id,
                text=row.text,
                created_at=ensure_tz_aware(row.created_at),
            )
            for row in model.about
        ],
        created_at=ensure_tz_aware(model.created_at),
        updated_at=ensure_tz_aware(model.updated_at),
    )


class UserRepositorySQLAlchemy(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._load(UserModel.id == user_id)
        return _to_user(model) if model is not None else None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        model = await self._load(UserModel.email == Email.of(email).value)
        return _to_user(model) if model is not None else None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        found = await self._session.scalar(
            select(UserModel.id).where(UserModel.email == Email.of(email).value),
        )
        return found is not None

    async def find_all(self) -> Sequence[User]:
        models = await self._session.scalars(
            _select_users().order_by(UserModel.created_at),
        )
        return [_to_user(m) for m in models]

    async def save(self, user: User) -> None:
        model = await self._load(UserModel.id == user.id)
        if model is None:
            self._session.add(
                UserModel(
                    id=user.id,
                    username=user.username,
                    email=user.email,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                ),
            )
        else:
            model.username = user.username
            model.email = user.email
            model.updated_at = utc_now()

        try:
            await self._session.flush()
        except IntegrityError as e:
            # email is the only unique column besides the primary key
            if "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise
        logger.debug("Saved user %s", user.id)

    async def prepend_about_entry(self, user_id: UUID, entry: AboutEntry) -> bool:
        # INSERT ... SELECT inserts nothing when the user row is gone
        source = select(
            _users.c.id,
            literal(entry.id, _about.c.id.type).label("id"),
            literal(entry.text, _about.c.text.type).label("text"),
            literal(entry.created_at, _about.c.created_at.type).label("created_at"),
        ).where(_users.c.id == user_id)
        result = await self._session.execute(
            insert(_about).from_select(["user_id", "id", "text", "created_at"], source),
        )
        if not result.rowcount:
            return False
        await self._touch(user_id)
        return True

    async def remove_about_entry(self, user_id: UUID, entry_id: UUID) -> int:
        result = await self._session.execute(
            delete(_about).where(_about.c.user_id == user_id, _about.c.id == entry_id),
        )
        if result.rowcount:
            await self._touch(user_id)
        return result.rowcount

    async def delete(self, user_id: UUID) -> bool:
        await self._session.execute(delete(_about).where(_about.c.user_id == user_id))
        result = await self._session.execute(
            delete(_users).where(_users.c.id == user_id),
        )
        if result.rowcount:
            logger.info("Deleted user %s", user_id)
        return result.rowcount > 0

    async def _load(self, *criteria) -> Optional[UserModel]:
        return await self._session.scalar(_select_users().where(*criteria))

    async def _touch(self, user_id: UUID) -> None:
        model = await self._session.get(UserModel, user_id)
        if model is not None:
            model.updated_at = utc_now()
        await self._session.flush()
