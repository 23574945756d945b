"""CSV upload reading and row adaptation."""

from .reader import (
    CsvReadError,
    MalformedCsvError,
    MissingColumnsError,
    ParsedTable,
    adapt_record,
    read_csv_async,
    read_csv_file,
)

__all__ = [
    "CsvReadError",
    "MalformedCsvError",
    "MissingColumnsError",
    "ParsedTable",
    "adapt_record",
    "read_csv_async",
    "read_csv_file",
]
