"""Actor - the application's view of an authenticated caller.

Commands receive an Actor rather than a User so the list core depends on
identity only through this port.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Actor:
    """Immutable identity of the caller performing a command."""

    user_id: UUID
    display_name: str

    def __str__(self) -> str:
        return f"Actor({self.display_name})"
