"""Error codes and the domain exception hierarchy.

Each exception category carries a default code; the HTTP status is chosen
by category in the presentation layer, so subclasses only pick a code.
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    """Machine-readable codes returned to API clients. Do not rename."""

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_EMAIL = "INVALID_EMAIL"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    LIST_ALREADY_LIKED = "LIST_ALREADY_LIKED"
    LIST_NOT_LIKED = "LIST_NOT_LIKED"

    # 401 / 423
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    ACCOUNT_LOCKED = "ACCOUNT_LOCKED"

    # 403
    FORBIDDEN = "FORBIDDEN"
    REGISTRATION_DISABLED = "REGISTRATION_DISABLED"

    # 404, malformed ids included
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    LIST_NOT_FOUND = "LIST_NOT_FOUND"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    ABOUT_ENTRY_NOT_FOUND = "ABOUT_ENTRY_NOT_FOUND"

    # 409
    CONFLICT = "CONFLICT"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"

    # 503
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base class for errors that are safe to show to API clients.

    Attributes
    ----------
    message
        Text returned to the client
    code
        Stable code for programmatic handling
    details
        Extra context for the logs; never sent to the client
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR
    default_message: ClassVar[str] = "Internal error"

    def __init__(
        self,
        message: str | None = None,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value}, details={self.details!r})"
        )


class ValidationError(DomainException):
    default_code = ErrorCode.VALIDATION_ERROR
    default_message = "Invalid input"


class InvalidIdentifierError(DomainException):
    """An id that is not a UUID. Reported like a missing resource."""

    default_code = ErrorCode.INVALID_IDENTIFIER
    default_message = "Invalid identifier"


class BusinessRuleViolation(DomainException):
    default_code = ErrorCode.BUSINESS_RULE_VIOLATION
    default_message = "Operation not allowed in the current state"


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND
    default_message = "Not found"


class ConflictError(DomainException):
    default_code = ErrorCode.CONFLICT
    default_message = "Conflicts with existing data"


class ForbiddenError(DomainException):
    """The actor may not change this resource."""

    default_code = ErrorCode.FORBIDDEN
    default_message = "You are not allowed to perform this action"


class StoreUnavailableError(DomainException):
    """The store timed out or could not be reached. Safe to retry."""

    default_code = ErrorCode.STORE_UNAVAILABLE
    default_message = "The data store is temporarily unavailable"
