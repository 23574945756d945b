from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

from .validation_error import ValidationError

"""ErrorRecord model for error logging.

This module defines the ErrorRecord dataclass used for structured error logging
of rejected batch uploads. Each record carries one ValidationError of one
uploaded file. Row 0 marks a whole-file (header) error.

JSON Lines schema (no extra keys): timestamp, file, row, field, message.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: Uploaded file name
        row: Data row number (1-based). 0 for whole-file errors
        field: CSV column name or "format"
        message: Validation message
    """
    timestamp: str  # ISO8601 UTC
    file: str
    row: int
    field: str
    message: str

    @staticmethod
    def create(file: str, error: ValidationError) -> ErrorRecord:
        """Create a new ErrorRecord for ``error`` with current UTC timestamp.

        Parameters:
            file: Uploaded file name
            error: The validation error to record

        Returns:
            New ErrorRecord instance with current UTC timestamp
        """
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            row=error.row,
            field=error.field,
            message=error.message,
        )

    def to_json_line(self) -> str:
        """Serialize ErrorRecord to JSON Lines format.

        Returns:
            JSON string representation without extra keys
        """
        return json.dumps(asdict(self), ensure_ascii=False)
