"""Parsing of raw identifier strings into domain value objects."""

from typing import TypeVar

from recording.domain.errors import InvalidIdentifierError
from recording.domain.value_objects import ClientId, EventId, SessionId, VisitorId

IdT = TypeVar("IdT", SessionId, EventId, ClientId, VisitorId)


def parse_identifier(id_type: type[IdT], raw: str | None, field: str) -> IdT:
    """Return ``id_type`` parsed from ``raw``.

    Raises:
        InvalidIdentifierError: If raw is missing or not a 24 character hex string.
    """
    if raw is None:
        raise InvalidIdentifierError(field)
    try:
        return id_type.from_string(raw)
    except ValueError:
        raise InvalidIdentifierError(field) from None
