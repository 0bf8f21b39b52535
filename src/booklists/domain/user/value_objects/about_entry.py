from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from booklists.domain.shared.exceptions import ValidationError
from booklists.domain.shared.time import utc_now

MAX_ABOUT_LENGTH = 2000


@dataclass(frozen=True)
class AboutEntry:
    """One "about me" paragraph on a user profile."""

    id: UUID
    text: str
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(cls, text: str) -> "AboutEntry":
        text = (text or "").strip()
        if not text:
            msg = "About text is required"
            raise ValidationError(msg, details={"field": "about"})
        if len(text) > MAX_ABOUT_LENGTH:
            msg = f"About text cannot exceed {MAX_ABOUT_LENGTH} characters"
            raise ValidationError(msg, details={"field": "about"})
        return cls(id=uuid4(), text=text)
