"""Credential storage port used by the authentication service."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID


@dataclass(frozen=True)
class UserCredentialData:
    """Read-only snapshot of one user's stored credential."""

    user_id: UUID
    password_hash: str
    failed_login_attempts: int = 0
    locked_until: datetime | None = None
    last_login_at: datetime | None = None


class UserCredentialRepository(ABC):
    """
    Password hashes plus the bookkeeping for account lockout.

    After ``MAX_FAILED_ATTEMPTS`` consecutive failures the account is locked
    for ``LOCKOUT_DURATION``. A successful login clears both.
    """

    MAX_FAILED_ATTEMPTS: int = 5
    LOCKOUT_DURATION: timedelta = timedelta(minutes=15)

    @abstractmethod
    async def save(self, user_id: UUID, password_hash: str) -> UserCredentialData:
        """Store a new hash for the user, creating the record if needed."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        ...

    @abstractmethod
    async def increment_failed_attempts(self, user_id: UUID) -> int:
        """
        Count one failed login, locking the account at the threshold.

        Returns
        -------
        The new number of consecutive failures (0 for an unknown user)
        """

    @abstractmethod
    async def reset_failed_attempts(self, user_id: UUID) -> None:
        ...

    @abstractmethod
    async def update_last_login(self, user_id: UUID) -> None:
        ...

    @abstractmethod
    async def is_account_locked(self, user_id: UUID) -> tuple[bool, datetime | None]:
        """
        Returns
        -------
        ``(True, locked_until)`` while a lock is in force, else ``(False, None)``
        """

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Remove the user's credential. False if there was none."""
