from booklists.application.ports.identity import Actor, IdentityProvider

__all__ = ["Actor", "IdentityProvider"]
