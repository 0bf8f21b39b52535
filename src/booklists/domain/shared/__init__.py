"""Shared domain components.

Exceptions, error codes and time helpers used across domain boundaries.
"""

from booklists.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    InvalidIdentifierError,
    StoreUnavailableError,
    ValidationError,
)
from booklists.domain.shared.identifiers import parse_identifier
from booklists.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "InvalidIdentifierError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "ConflictError",
    "ForbiddenError",
    "StoreUnavailableError",
    # Utilities
    "ensure_tz_aware",
    "parse_identifier",
    "utc_now",
]
