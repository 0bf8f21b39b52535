"""SQLAlchemy model for password credentials and lockout state."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from booklists.domain.shared.time import ensure_tz_aware, utc_now
from booklists_auth.persistence.sqlalchemy.base import AuthBase


class UserCredentialModel(AuthBase):
    """
    One row per user: bcrypt hash, failed-attempt counter, lock expiry.

    user_id has no foreign key to ``users``; the application deletes the
    row itself when an account goes away.

    Table: user_credentials
    """

    __tablename__ = "user_credentials"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(Uuid, unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    failed_login_attempts: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )
    locked_until: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )

    def __repr__(self) -> str:
        return f"<UserCredentialModel(user_id={self.user_id})>"

    def locked_at(self, moment: datetime) -> bool:
        """Whether a lock set on this row is still in force at ``moment``."""
        if self.locked_until is None:
            return False
        return moment < ensure_tz_aware(self.locked_until)
