"""Email addresses, compared and stored lower-cased."""

import re
from dataclasses import dataclass
from typing import Union

from booklists.domain.user.exceptions import InvalidEmailError

_LOCAL_PART = r"[a-z0-9._%+-]+"
_DOMAIN = r"[a-z0-9-]+(?:\.[a-z0-9-]+)*\.[a-z]{2,}"
EMAIL_PATTERN = re.compile(rf"{_LOCAL_PART}@{_DOMAIN}")


@dataclass(frozen=True)
class Email:
    """A syntactically valid, lower-cased email address.

    Account uniqueness is decided on this normalized form, so
    ``Alice@Example.com`` and ``alice@example.com`` are the same user.
    """

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip().lower()
        if not normalized:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)
        if not EMAIL_PATTERN.fullmatch(normalized):
            msg = "Please include a valid email"
            raise InvalidEmailError(msg)
        object.__setattr__(self, "value", normalized)

    @classmethod
    def of(cls, email: Union[str, "Email"]) -> "Email":
        """Accept either a raw string or an already validated Email."""
        return email if isinstance(email, cls) else cls(email)

    def __str__(self) -> str:
        return self.value
