"""Book entry value object."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from booklists.domain.shared.exceptions import ValidationError
from booklists.domain.shared.time import utc_now

MAX_TITLE_LENGTH = 500


@dataclass(frozen=True)
class BookEntry:
    """A book added to a list.

    Entries have no identity beyond their position; the same title may
    appear any number of times.
    """

    title: str
    name: str
    user_id: UUID
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(cls, title: str, name: str, user_id: UUID) -> "BookEntry":
        title = (title or "").strip()
        if not title:
            msg = "Title is required"
            raise ValidationError(msg, details={"field": "title"})
        if len(title) > MAX_TITLE_LENGTH:
            msg = f"Title cannot exceed {MAX_TITLE_LENGTH} characters"
            raise ValidationError(msg, details={"field": "title"})
        return cls(title=title, name=name, user_id=user_id)
