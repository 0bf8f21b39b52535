"""Errors raised by booklists_auth and the identity adapter.

The API answers all of them with 401, except ``AccountLockedError`` (423)
and ``WeakPasswordError`` (400).
"""


class AuthError(Exception):
    default_message = "Authentication error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingCredentialError(AuthError):
    """The request carried no bearer token."""

    default_message = "Authentication required"


class InvalidTokenError(AuthError):
    default_message = "Invalid or expired token"


class WeakPasswordError(AuthError):
    default_message = "Password does not meet requirements"


class InvalidCredentialsError(AuthError):
    """Wrong email or password. Deliberately does not say which."""

    default_message = "Invalid email or password"


class AccountLockedError(AuthError):
    default_message = "Account is locked due to too many failed login attempts"

    def __init__(self, message: str | None = None, locked_until: str | None = None):
        self.locked_until = locked_until
        message = message or self.default_message
        if locked_until:
            message = f"{message}. Try again after {locked_until}"
        super().__init__(message)
