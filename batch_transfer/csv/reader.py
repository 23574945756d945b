from __future__ import annotations

import asyncio
import io
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any, Union

import pandas as pd

from ..models.transaction import (
    ACCOUNT_HOLDER_NAME,
    ACCOUNT_NUMBER,
    AMOUNT,
    REQUIRED_COLUMNS,
    TRANSACTION_DATE,
    RawRecord,
)

"""CSV reader for batch transfer uploads.

The first line is the header row; every following non-blank line is a data
row. Cells are read as raw strings: no dtype inference and no NA conversion,
so values such as ``000-000000000-00`` or ``NA`` reach validation untouched.

A payload with no header line at all yields an empty column list rather
than an error; the header check downstream rejects it.
"""

__all__ = [
    "CsvReadError",
    "MalformedCsvError",
    "MissingColumnsError",
    "ParsedTable",
    "CsvSource",
    "read_csv_file",
    "read_csv_async",
    "adapt_record",
]

CsvSource = Union[Path, str, bytes, IO[Any]]


class CsvReadError(Exception):
    """Raised when the upload cannot be read as CSV at all."""


class MalformedCsvError(CsvReadError):
    """Raised when the upload exists but is not well-formed CSV (bad bytes, ragged rows)."""


class MissingColumnsError(Exception):
    """Raised when a row mapping lacks one of the required columns."""


@dataclass
class ParsedTable:
    columns: list[str]
    rows: list[dict[str, str]] = field(default_factory=list)  # column name -> raw cell

    @property
    def row_count(self) -> int:
        return len(self.rows)


def _as_buffer(source: CsvSource) -> Path | IO[Any]:
    if isinstance(source, bytes):
        return io.BytesIO(source)
    if isinstance(source, str):
        return Path(source)
    return source


def read_csv_file(source: CsvSource, *, encoding: str = "utf-8-sig") -> ParsedTable:
    """Parse a CSV upload into header list and raw row mappings.

    Parameters
    ----------
    source: file path (Path or str), raw bytes, or an open file object
    encoding: text encoding; the default also strips a UTF-8 BOM
    """
    buffer = _as_buffer(source)
    if isinstance(buffer, Path) and not buffer.exists():
        raise CsvReadError(f"file not found: {buffer}")
    try:
        df = pd.read_csv(
            buffer,
            dtype=str,
            # Trailing delimiters must not turn the first field into an index
            index_col=False,
            keep_default_na=False,
            na_filter=False,
            skipinitialspace=True,
            skip_blank_lines=True,
            encoding=encoding,
        )
    except pd.errors.EmptyDataError:
        return ParsedTable(columns=[], rows=[])
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise MalformedCsvError(f"malformed csv: {e}") from e
    except OSError as e:
        raise CsvReadError(f"unreadable csv: {e}") from e

    columns = [str(c).strip() for c in df.columns.tolist()]
    df.columns = columns
    # Short rows leave trailing cells unset
    df = df.fillna("")
    rows = [{str(k): str(v) for k, v in r.items()} for r in df.to_dict(orient="records")]
    return ParsedTable(columns=columns, rows=rows)


async def read_csv_async(source: CsvSource, *, encoding: str = "utf-8-sig") -> ParsedTable:
    """Parse a CSV upload off the event loop; resolves once with the complete table."""
    return await asyncio.to_thread(read_csv_file, source, encoding=encoding)


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str) and pd.isna(value):
        return ""
    return str(value)


def adapt_record(row: Mapping[str, Any]) -> RawRecord:
    """Convert an untyped row mapping into a RawRecord.

    Raises:
        MissingColumnsError: if any required column key is absent
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in row]
    if missing:
        raise MissingColumnsError(f"row missing columns: {sorted(missing)}")
    return RawRecord(
        transaction_date=_cell(row[TRANSACTION_DATE]),
        account_number=_cell(row[ACCOUNT_NUMBER]),
        account_holder_name=_cell(row[ACCOUNT_HOLDER_NAME]),
        amount=_cell(row[AMOUNT]),
    )
