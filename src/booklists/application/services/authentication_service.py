"""Registration, password login and token refresh."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from booklists.domain.user import Email, EmailAlreadyExistsError, User
from booklists_auth import (
    AccountLockedError,
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)
from booklists_auth.repositories import UserCredentialRepository

if TYPE_CHECKING:
    from booklists.domain.user import UserRepository

logger = logging.getLogger(__name__)

# (access token, refresh token)
TokenPair = tuple[str, str]


class AuthenticationService:
    """
    Glue between the user domain and booklists_auth.

    The service never commits; the caller owns the session and decides
    whether a failed login attempt is persisted.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    @property
    def access_token_lifetime_seconds(self) -> int:
        return int(self._jwt_service.access_token_lifetime.total_seconds())

    async def register(
        self,
        username: str,
        email: str,
        password: str,
    ) -> tuple[User, str, str]:
        """
        Create a user with a password credential and sign them in.

        All input is validated before anything is written.

        Raises
        ------
        ValidationError
            If the username is empty
        InvalidEmailError
            If the email is malformed
        WeakPasswordError
            If the password breaks the length rules
        EmailAlreadyExistsError
            If the email is taken
        """
        user = User.create(username=username, email=Email(email))
        password_hash = self._password_service.hash(password)
        if await self._user_repo.exists_by_email(user.email):
            raise EmailAlreadyExistsError(user.email)

        await self._user_repo.save(user)
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)
        logger.info("Registered user %s", user.id)
        return (user, *self._issue_tokens(user))

    async def login(self, email: str, password: str) -> tuple[User, str, str]:
        """
        Raises
        ------
        InvalidCredentialsError
            Unknown email, missing credential or wrong password
        AccountLockedError
            Too many recent failures
        """
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError

        await self._ensure_not_locked(user.id)
        await self._check_password(user, password)

        await self._credential_repo.reset_failed_attempts(user.id)
        await self._credential_repo.update_last_login(user.id)
        logger.info("User %s signed in", user.id)
        return (user, *self._issue_tokens(user))

    async def refresh_token(self, refresh_token: str) -> TokenPair:
        payload = self._jwt_service.verify_token(refresh_token)
        if not payload.is_refresh_token():
            msg = "Not a refresh token"
            raise InvalidTokenError(msg)

        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            msg = "User not found"
            raise InvalidTokenError(msg)
        return self._issue_tokens(user)

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)

    async def _ensure_not_locked(self, user_id: UUID) -> None:
        locked, locked_until = await self._credential_repo.is_account_locked(user_id)
        if locked:
            until = locked_until.isoformat() if locked_until else "unknown"
            raise AccountLockedError(locked_until=until)

    async def _check_password(self, user: User, password: str) -> None:
        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None:
            raise InvalidCredentialsError
        if self._password_service.verify(password, credential.password_hash):
            if self._password_service.needs_rehash(credential.password_hash):
                await self._credential_repo.save(
                    user_id=user.id,
                    password_hash=self._password_service.hash(password),
                )
                logger.info("Rehashed password for user %s", user.id)
            return

        attempts = await self._credential_repo.increment_failed_attempts(user.id)
        logger.warning("Wrong password for user %s (attempt %d)", user.id, attempts)
        raise InvalidCredentialsError

    def _issue_tokens(self, user: User) -> TokenPair:
        claims = {"user_id": user.id, "email": user.email}
        return (
            self._jwt_service.create_access_token(**claims),
            self._jwt_service.create_refresh_token(**claims),
        )
