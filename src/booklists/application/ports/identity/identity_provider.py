from abc import ABC, abstractmethod

from booklists.application.ports.identity.actor import Actor


class IdentityProvider(ABC):
    """Turns a presented credential into an Actor."""

    @abstractmethod
    async def verify(self, credential: str | None) -> Actor:
        """
        Verify a credential and resolve the caller.

        Raises
        ------
        AuthError
            If the credential is missing, invalid, expired, of the wrong
            kind, or belongs to a user that no longer exists
        """
