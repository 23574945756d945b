"""Header and per-row validation rules."""

from .record import normalize_record, validate_record
from .schema import REQUIRED_HEADERS, missing_headers, validate_schema

__all__ = [
    "REQUIRED_HEADERS",
    "missing_headers",
    "validate_schema",
    "validate_record",
    "normalize_record",
]
