"""Data classes shared by the auth services."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

ACCESS_TOKEN = "access"  # NOQA: S105
REFRESH_TOKEN = "refresh"  # NOQA: S105


@dataclass(frozen=True)
class TokenPayload:
    """Decoded content of a verified JWT."""

    user_id: UUID
    email: str
    exp: datetime
    token_type: str = ACCESS_TOKEN

    def is_access_token(self) -> bool:
        return self.token_type == ACCESS_TOKEN

    def is_refresh_token(self) -> bool:
        return self.token_type == REFRESH_TOKEN
