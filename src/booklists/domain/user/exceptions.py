"""User domain exceptions."""

from booklists.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when an email address is empty or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "User already exists",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: object) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )


class AboutEntryNotFoundError(EntityNotFoundError):
    """No about entry with the given id belongs to the user."""

    def __init__(self, user_id: object, entry_id: object) -> None:
        self.entry_id = entry_id
        super().__init__(
            "About entry not found",
            code=ErrorCode.ABOUT_ENTRY_NOT_FOUND,
            details={"user_id": str(user_id), "entry_id": str(entry_id)},
        )
