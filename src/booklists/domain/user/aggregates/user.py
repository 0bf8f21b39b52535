from datetime import datetime
from typing import Optional, Sequence, Union
from uuid import UUID, uuid4

from booklists.domain.shared.exceptions import ValidationError
from booklists.domain.shared.time import utc_now
from booklists.domain.user.value_objects import AboutEntry, Email

MAX_USERNAME_LENGTH = 50


class User:
    """
    User aggregate root.

    Identified by a random UUID generated at creation time. The username is
    the display name copied onto book entries and comments; the email is
    unique and used to log in.
    """

    def __init__(  # NOQA: PLR0913
        self,
        username: str,
        email: Union[str, Email],
        id: Optional[UUID] = None,
        about: Sequence[AboutEntry] = (),
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._username = self._validate_username(username)
        self._email = Email.of(email)
        self._id = id if id is not None else uuid4()
        self._about = tuple(about)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @staticmethod
    def _validate_username(username: str) -> str:
        username = (username or "").strip()
        if not username:
            msg = "Username is required"
            raise ValidationError(msg, details={"field": "username"})
        if len(username) > MAX_USERNAME_LENGTH:
            msg = f"Username cannot exceed {MAX_USERNAME_LENGTH} characters"
            raise ValidationError(msg, details={"field": "username"})
        return username

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def about(self) -> tuple[AboutEntry, ...]:
        """About entries, newest first."""
        return self._about

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(cls, username: str, email: Union[str, Email]) -> "User":
        return cls(username=username, email=email)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        username: str,
        email: Union[str, Email],
        about: Sequence[AboutEntry],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            username=username,
            email=email,
            about=about,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username!r})"
