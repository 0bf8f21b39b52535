"""IdentityProvider adapter backed by JWT access tokens."""

import logging

from booklists.application.ports.identity import Actor, IdentityProvider
from booklists.domain.user import UserRepository
from booklists_auth import InvalidTokenError, JWTService
from booklists_auth.exceptions import MissingCredentialError

logger = logging.getLogger(__name__)


class JWTIdentityProvider(IdentityProvider):
    """Resolve a bearer token to the Actor of the user it was issued to.

    The user is looked up on every call so a token outliving its account
    is rejected and the display name is always current.
    """

    def __init__(self, jwt_service: JWTService, user_repository: UserRepository):
        self._jwt_service = jwt_service
        self._user_repo = user_repository

    async def verify(self, credential: str | None) -> Actor:
        if not credential:
            raise MissingCredentialError

        payload = self._jwt_service.verify_token(credential)

        # Refresh tokens are only accepted at /auth/refresh
        if not payload.is_access_token():
            logger.warning(
                "Refresh token used as access token for user: %s",
                payload.user_id,
            )
            msg = "Invalid token type"
            raise InvalidTokenError(msg)

        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            logger.warning("User not found for token: %s", payload.user_id)
            msg = "User not found"
            raise InvalidTokenError(msg)

        return Actor(user_id=user.id, display_name=user.username)
