"""Parsing of externally supplied identifiers."""

from uuid import UUID

from booklists.domain.shared.exceptions import InvalidIdentifierError


def parse_identifier(value: str | UUID, kind: str = "resource") -> UUID:
    """Parse a UUID string coming from a path or request body.

    Raises
    ------
    InvalidIdentifierError
        If the value is not a well-formed UUID.
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value).strip())
    except (ValueError, AttributeError) as e:
        msg = f"Invalid {kind} id: {value!r}"
        raise InvalidIdentifierError(msg, details={"value": str(value)}) from e
