"""Translate exceptions into JSON error responses.

Every error body has the same shape::

    {"detail": "Human-readable message", "code": "MACHINE_READABLE_CODE"}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import InterfaceError, OperationalError

from booklists.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    StoreUnavailableError,
)
from booklists_auth import AccountLockedError, AuthError, WeakPasswordError

logger = logging.getLogger(__name__)

_CODES_BY_STATUS: dict[int, tuple[ErrorCode, ...]] = {
    status.HTTP_400_BAD_REQUEST: (
        ErrorCode.VALIDATION_ERROR,
        ErrorCode.INVALID_EMAIL,
        ErrorCode.WEAK_PASSWORD,
        ErrorCode.BUSINESS_RULE_VIOLATION,
        ErrorCode.LIST_ALREADY_LIKED,
        ErrorCode.LIST_NOT_LIKED,
    ),
    status.HTTP_401_UNAUTHORIZED: (ErrorCode.AUTHENTICATION_FAILED,),
    status.HTTP_403_FORBIDDEN: (
        ErrorCode.FORBIDDEN,
        ErrorCode.REGISTRATION_DISABLED,
    ),
    status.HTTP_404_NOT_FOUND: (
        ErrorCode.INVALID_IDENTIFIER,
        ErrorCode.ENTITY_NOT_FOUND,
        ErrorCode.LIST_NOT_FOUND,
        ErrorCode.COMMENT_NOT_FOUND,
        ErrorCode.USER_NOT_FOUND,
        ErrorCode.ABOUT_ENTRY_NOT_FOUND,
    ),
    status.HTTP_409_CONFLICT: (ErrorCode.CONFLICT, ErrorCode.DUPLICATE_EMAIL),
    status.HTTP_423_LOCKED: (ErrorCode.ACCOUNT_LOCKED,),
    status.HTTP_500_INTERNAL_SERVER_ERROR: (ErrorCode.INTERNAL_ERROR,),
    status.HTTP_503_SERVICE_UNAVAILABLE: (ErrorCode.STORE_UNAVAILABLE,),
}

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    code: status_code
    for status_code, codes in _CODES_BY_STATUS.items()
    for code in codes
}

# Used only for codes missing from the table; anything else is a 400.
_FALLBACK_STATUS: tuple[tuple[type[DomainException], int], ...] = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def _get_status_for_exception(exc: DomainException) -> int:
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]
    for exc_type, status_code in _FALLBACK_STATUS:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _error(
    status_code: int,
    message: str,
    code: ErrorCode,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code.value},
        headers=headers,
    )


def _where(request: Request) -> str:
    return f"{request.method} {request.url.path}"


async def _on_domain_error(request: Request, exc: DomainException) -> JSONResponse:
    logger.warning(
        "%s failed: %s (code=%s, details=%s)",
        _where(request),
        exc.message,
        exc.code.value,
        exc.details,
    )
    return _error(_get_status_for_exception(exc), exc.message, exc.code)


async def _on_auth_error(request: Request, exc: AuthError) -> JSONResponse:
    logger.warning("%s rejected: %s", _where(request), exc.message)
    if isinstance(exc, AccountLockedError):
        return _error(status.HTTP_423_LOCKED, exc.message, ErrorCode.ACCOUNT_LOCKED)
    if isinstance(exc, WeakPasswordError):
        return _error(
            status.HTTP_400_BAD_REQUEST,
            exc.message,
            ErrorCode.WEAK_PASSWORD,
        )
    return _error(
        status.HTTP_401_UNAUTHORIZED,
        exc.message,
        ErrorCode.AUTHENTICATION_FAILED,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def _on_request_validation(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Malformed bodies are reported like domain validation errors.

    Only the first problem is described, as ``<field>: <message>``.
    """
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        text = first.get("msg", "Invalid value")
        message = f"{field}: {text}" if field else text

    logger.info("%s invalid request: %s", _where(request), message)
    return _error(status.HTTP_400_BAD_REQUEST, message, ErrorCode.VALIDATION_ERROR)


async def _on_database_down(request: Request, exc: Exception) -> JSONResponse:
    # Raised by the request session; the list store converts its own.
    logger.error("%s database unavailable: %s", _where(request), exc)
    return _error(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        StoreUnavailableError.default_message,
        ErrorCode.STORE_UNAVAILABLE,
    )


async def _on_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s unhandled %s", _where(request), type(exc).__name__)
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal error occurred",
        ErrorCode.INTERNAL_ERROR,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, _on_domain_error)
    app.add_exception_handler(AuthError, _on_auth_error)
    app.add_exception_handler(RequestValidationError, _on_request_validation)
    app.add_exception_handler(OperationalError, _on_database_down)
    app.add_exception_handler(InterfaceError, _on_database_down)
    app.add_exception_handler(Exception, _on_unexpected)
