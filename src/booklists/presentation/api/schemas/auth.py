"""Request and response bodies for /auth."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from booklists.presentation.api.schemas.users import UserResponse

_EXAMPLE_EMAIL = "alice@example.com"
_EXAMPLE_PASSWORD = "correct-horse-battery"


class LoginRequest(BaseModel):
    email: EmailStr
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": _EXAMPLE_EMAIL, "password": _EXAMPLE_PASSWORD},
        },
    )


class RegisterRequest(LoginRequest):
    """Account data; password length is checked by the password service."""

    username: str = Field(
        ...,
        max_length=50,
        description="Display name copied onto books and comments",
    )
    password: str = Field(..., max_length=128, description="6 to 128 characters")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "email": _EXAMPLE_EMAIL,
                "password": _EXAMPLE_PASSWORD,
            },
        },
    )


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., description="Refresh token from login")


class TokenResponse(BaseModel):
    """A fresh token pair. ``expires_in`` refers to the access token."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Seconds until the access token expires")


class AuthResponse(TokenResponse):
    """Token pair plus the signed-in user's own profile."""

    user: UserResponse
