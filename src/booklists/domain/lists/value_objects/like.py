from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from booklists.domain.shared.time import utc_now


@dataclass(frozen=True)
class Like:
    """A user's like on a list. At most one per user per list."""

    user_id: UUID
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(cls, user_id: UUID) -> "Like":
        return cls(user_id=user_id)
