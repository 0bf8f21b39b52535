from booklists.application.ports.identity.actor import Actor
from booklists.application.ports.identity.identity_provider import IdentityProvider

__all__ = ["Actor", "IdentityProvider"]
