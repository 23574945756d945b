from __future__ import annotations

from dataclasses import asdict, dataclass

"""ValidationError model: one row/field/message triple of the error report."""

__all__ = [
    "SCHEMA_ROW",
    "ValidationError",
]

# Row number reserved for whole-file (header) errors
SCHEMA_ROW = 0


@dataclass(frozen=True)
class ValidationError:
    """A single validation failure.

    Attributes:
        row: 1-based data row number. 0 for whole-file errors
        field: CSV column name, or "format" for whole-file errors
        message: Human readable description
    """
    row: int
    field: str
    message: str

    @property
    def is_schema_error(self) -> bool:
        return self.row == SCHEMA_ROW

    def describe(self) -> str:
        """Render as a report line, e.g. ``Row 2: Amount - Amount must be a positive number``."""
        return f"Row {self.row}: {self.field} - {self.message}"

    def to_dict(self) -> dict[str, object]:
        return asdict(self)
