"""SQLAlchemy implementation for booklists_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- UserCredentialModel: SQLAlchemy model for credentials
- UserCredentialRepositorySQLAlchemy: Repository implementation

The consuming application must create AuthBase.metadata alongside its own
metadata so the user_credentials table exists.
"""

from booklists_auth.persistence.sqlalchemy.base import AuthBase
from booklists_auth.persistence.sqlalchemy.models import UserCredentialModel
from booklists_auth.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
]
