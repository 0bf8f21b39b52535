"""User domain - user identity and profile.

Design notes:
- User ID is a random UUID4 generated at creation (opaque, unpredictable)
- Email is unique and normalized to lower case
- About entries are value objects added and removed one at a time
- Repository interface defined here, implementation in infrastructure
"""

from booklists.domain.user.aggregates import User
from booklists.domain.user.exceptions import (
    AboutEntryNotFoundError,
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from booklists.domain.user.repositories import UserRepository
from booklists.domain.user.value_objects import AboutEntry, Email

__all__ = [
    "AboutEntry",
    "AboutEntryNotFoundError",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
