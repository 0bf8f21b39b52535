"""Password and token handling, independent of the book list domain.

Services (bcrypt hashing, JWT issue and verify) are pure; credential storage
is an abstract repository with a SQLAlchemy implementation under
``booklists_auth.persistence.sqlalchemy``, mapped on its own ``AuthBase``.
"""

from booklists_auth.exceptions import (
    AccountLockedError,
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingCredentialError,
    WeakPasswordError,
)
from booklists_auth.repositories import UserCredentialData, UserCredentialRepository
from booklists_auth.schemas import TokenPayload
from booklists_auth.services import JWTService, PasswordHashingService

__all__ = [
    "AccountLockedError",
    "AuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "JWTService",
    "MissingCredentialError",
    "PasswordHashingService",
    "TokenPayload",
    "UserCredentialData",
    "UserCredentialRepository",
    "WeakPasswordError",
]
