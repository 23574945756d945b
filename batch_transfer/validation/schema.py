from __future__ import annotations

from collections.abc import Iterable

from ..models.transaction import REQUIRED_COLUMNS

"""Header check for batch transfer uploads.

Every required column must be present; order does not matter and extra
columns are tolerated. An empty header list fails.
"""

__all__ = [
    "REQUIRED_HEADERS",
    "missing_headers",
    "validate_schema",
]

REQUIRED_HEADERS: frozenset[str] = frozenset(REQUIRED_COLUMNS)


def missing_headers(headers: Iterable[str]) -> list[str]:
    """Return the required headers absent from ``headers`` (sorted)."""
    return sorted(REQUIRED_HEADERS - set(headers))


def validate_schema(headers: Iterable[str]) -> bool:
    return not missing_headers(headers)
