from booklists.infrastructure.adapters.identity.jwt_identity_provider import (
    JWTIdentityProvider,
)

__all__ = ["JWTIdentityProvider"]
