"""Query parameter parsing for list endpoints."""

from collections.abc import Mapping

from django.conf import settings

from recording.domain import Page
from recording.domain.errors import InvalidPaginationError

# Largest value a SQL OFFSET/LIMIT (signed 64-bit) accepts
MAX_PAGE_VALUE = 2**63 - 1


def _parse_non_negative(raw: str | None, name: str, default: int) -> int:
    if raw is None:
        return default
    raw = raw.strip()
    # isdigit() rejects signs, so "-1" and "+1" both fail here
    if not raw.isascii() or not raw.isdigit():
        raise InvalidPaginationError(name)
    # length check first keeps int() away from oversized digit strings
    if len(raw) > len(str(MAX_PAGE_VALUE)) or int(raw) > MAX_PAGE_VALUE:
        raise InvalidPaginationError(name)
    return int(raw)


def parse_page(query_params: Mapping[str, str]) -> Page:
    """Build a Page from ``offset`` and ``limit`` query parameters.

    Missing values fall back to 0 and RECORDING_DEFAULT_PAGE_SIZE;
    limit is clamped to RECORDING_MAX_PAGE_SIZE.

    Raises:
        InvalidPaginationError: If either value is not a non-negative integer.
    """
    offset = _parse_non_negative(query_params.get("offset"), "Offset", 0)
    limit = _parse_non_negative(query_params.get("limit"), "Limit", settings.RECORDING_DEFAULT_PAGE_SIZE)
    return Page(offset=offset, limit=min(limit, settings.RECORDING_MAX_PAGE_SIZE))


def optional_param(query_params: Mapping[str, str], name: str) -> str | None:
    """Return a query parameter, treating an empty value as absent."""
    value = query_params.get(name)
    if value is None or not value.strip():
        return None
    return value
