"""Comment value object."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from booklists.domain.shared.exceptions import ValidationError
from booklists.domain.shared.time import utc_now


@dataclass(frozen=True)
class Comment:
    """Free-text comment on a list.

    Carries its own id so it can be removed without relying on its
    position, which shifts as other comments are prepended or removed.
    """

    id: UUID
    text: str
    name: str
    user_id: UUID
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(cls, text: str, name: str, user_id: UUID) -> "Comment":
        text = (text or "").strip()
        if not text:
            msg = "Text is required"
            raise ValidationError(msg, details={"field": "text"})
        return cls(id=uuid4(), text=text, name=name, user_id=user_id)

    def is_authored_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id
