"""Signed access and refresh tokens (PyJWT, HS256)."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from booklists_auth.exceptions import InvalidTokenError
from booklists_auth.schemas import ACCESS_TOKEN, REFRESH_TOKEN, TokenPayload


class JWTService:
    """Issue and verify tokens for one signing secret.

    Both token kinds carry ``sub`` (user id), ``email``, ``type``, ``iat``
    and ``exp``. Which kind a caller accepts is its own decision; the
    identity provider only takes access tokens, ``/auth/refresh`` only
    refresh tokens.

    Examples
    --------
    >>> service = JWTService(secret_key="change-me")
    >>> token = service.create_access_token(user_id, "reader@example.com")
    >>> service.verify_token(token).user_id == user_id
    True
    """

    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ("sub", "email", "type", "exp")

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = 1,
        refresh_token_expire_days: int = 7,
    ):
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._lifetimes = {
            ACCESS_TOKEN: timedelta(hours=access_token_expire_hours),
            REFRESH_TOKEN: timedelta(days=refresh_token_expire_days),
        }

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._lifetimes[ACCESS_TOKEN]

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        return self._issue(ACCESS_TOKEN, user_id, email, expires_delta)

    def create_refresh_token(
        self,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        return self._issue(REFRESH_TOKEN, user_id, email, expires_delta)

    def verify_token(self, token: str) -> TokenPayload:
        """
        Check signature, expiry and required claims.

        Raises
        ------
        InvalidTokenError
            If the token is expired, forged, malformed or of unknown type
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": list(self.REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.MissingRequiredClaimError as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        if claims["type"] not in self._lifetimes:
            msg = f"Malformed token payload: unknown type {claims['type']!r}"
            raise InvalidTokenError(msg)
        try:
            user_id = UUID(claims["sub"])
        except (TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

        return TokenPayload(
            user_id=user_id,
            email=claims["email"],
            exp=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
            token_type=claims["type"],
        )

    def _issue(
        self,
        token_type: str,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None,
    ) -> str:
        issued_at = datetime.now(tz=timezone.utc)
        claims = {
            "sub": str(user_id),
            "email": email,
            "type": token_type,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or self._lifetimes[token_type]),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.ALGORITHM)
