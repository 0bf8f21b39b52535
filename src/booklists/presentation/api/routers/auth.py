"""Registration, login and token refresh endpoints."""

from fastapi import APIRouter, status

from booklists.domain.shared.exceptions import ErrorCode, ForbiddenError
from booklists.presentation.api.dependencies import (
    AuthService,
    DBSession,
    SettingsDep,
)
from booklists.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    TokenResponse,
)
from booklists.presentation.api.schemas.common import error_responses
from booklists.presentation.api.schemas.users import UserResponse
from booklists_auth import AccountLockedError, InvalidCredentialsError

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={**error_responses(400, 403), 409: {"description": "Email taken"}},
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Create an account and return a token pair.

    The username is the display name copied onto books and comments.
    """
    if not settings.registration_enabled:
        msg = "Registration is disabled"
        raise ForbiddenError(msg, code=ErrorCode.REGISTRATION_DISABLED)

    user, access_token, refresh_token = await auth_service.register(
        username=request.username,
        email=request.email,
        password=request.password,
    )
    await session.commit()

    return AuthResponse(
        user=UserResponse.from_domain(user, include_email=True),
        access_token=access_token,
        refresh_token=refresh_token,
        expires_in=auth_service.access_token_lifetime_seconds,
    )


@router.post(
    "/login",
    summary="Sign in with email and password",
    responses={**error_responses(400, 401), 423: {"description": "Account locked"}},
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """Repeated wrong passwords lock the account for a while."""
    try:
        user, access_token, refresh_token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
    except (InvalidCredentialsError, AccountLockedError):
        await session.commit()  # keep the failed-attempt counter
        raise
    await session.commit()

    return AuthResponse(
        user=UserResponse.from_domain(user, include_email=True),
        access_token=access_token,
        refresh_token=refresh_token,
        expires_in=auth_service.access_token_lifetime_seconds,
    )


@router.post(
    "/refresh",
    summary="Exchange a refresh token",
    responses=error_responses(400, 401),
)
async def refresh_token(
    request: RefreshRequest,
    auth_service: AuthService,
) -> TokenResponse:
    access_token, new_refresh_token = await auth_service.refresh_token(
        refresh_token=request.refresh_token,
    )
    return TokenResponse(
        access_token=access_token,
        refresh_token=new_refresh_token,
        expires_in=auth_service.access_token_lifetime_seconds,
    )
