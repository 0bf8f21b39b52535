"""SQLAlchemy implementation of UserCredentialRepository."""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from booklists.domain.shared.time import ensure_tz_aware, utc_now
from booklists_auth.persistence.sqlalchemy.models import UserCredentialModel
from booklists_auth.repositories import UserCredentialData, UserCredentialRepository

logger = logging.getLogger(__name__)


def _aware(value: datetime | None) -> datetime | None:
    return ensure_tz_aware(value) if value is not None else None


class UserCredentialRepositorySQLAlchemy(UserCredentialRepository):
    """Credential storage and lockout bookkeeping on an AsyncSession.

    Only flushes; whoever owns the session commits (the request
    dependency in the API). Failed attempts are therefore counted even
    when the login request itself fails, as long as the caller commits.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, user_id: UUID, password_hash: str) -> UserCredentialData:
        credential = await self._get(user_id)
        if credential is None:
            credential = UserCredentialModel(
                user_id=user_id,
                password_hash=password_hash,
                failed_login_attempts=0,
            )
            self._session.add(credential)
            logger.info("Created credentials for user: %s", user_id)
        else:
            credential.password_hash = password_hash
            logger.debug("Replaced password hash for user: %s", user_id)

        await self._session.flush()
        return self._snapshot(credential)

    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        credential = await self._get(user_id)
        return self._snapshot(credential) if credential else None

    async def increment_failed_attempts(self, user_id: UUID) -> int:
        credential = await self._get(user_id)
        if credential is None:
            return 0

        credential.failed_login_attempts += 1
        if credential.failed_login_attempts >= self.MAX_FAILED_ATTEMPTS:
            credential.locked_until = utc_now() + self.LOCKOUT_DURATION
            logger.warning(
                "Locked user %s until %s after %d failed logins",
                user_id,
                credential.locked_until.isoformat(),
                credential.failed_login_attempts,
            )

        await self._session.flush()
        return credential.failed_login_attempts

    async def reset_failed_attempts(self, user_id: UUID) -> None:
        credential = await self._get(user_id)
        if credential is None or (
            credential.failed_login_attempts == 0 and credential.locked_until is None
        ):
            return
        credential.failed_login_attempts = 0
        credential.locked_until = None
        await self._session.flush()

    async def update_last_login(self, user_id: UUID) -> None:
        credential = await self._get(user_id)
        if credential is not None:
            credential.last_login_at = utc_now()
            await self._session.flush()

    async def is_account_locked(self, user_id: UUID) -> tuple[bool, datetime | None]:
        credential = await self._get(user_id)
        if credential is None or not credential.locked_at(utc_now()):
            return False, None
        return True, ensure_tz_aware(credential.locked_until)

    async def delete(self, user_id: UUID) -> bool:
        credential = await self._get(user_id)
        if credential is None:
            return False
        await self._session.delete(credential)
        await self._session.flush()
        logger.info("Deleted credentials for user: %s", user_id)
        return True

    async def _get(self, user_id: UUID) -> UserCredentialModel | None:
        result = await self._session.execute(
            select(UserCredentialModel).where(UserCredentialModel.user_id == user_id),
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _snapshot(model: UserCredentialModel) -> UserCredentialData:
        return UserCredentialData(
            user_id=model.user_id,
            password_hash=model.password_hash,
            failed_login_attempts=model.failed_login_attempts,
            locked_until=_aware(model.locked_until),
            last_login_at=_aware(model.last_login_at),
        )
