from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path

from ..csv.reader import (
    CsvSource,
    MalformedCsvError,
    MissingColumnsError,
    ParsedTable,
    adapt_record,
    read_csv_async,
    read_csv_file,
)
from ..logging.error_log import ErrorLogBuffer
from ..logging.init import upload_logger
from ..models.error_record import ErrorRecord
from ..models.ingestion_result import IngestionResult
from ..models.transaction import RawRecord, Transaction
from ..models.validation_error import SCHEMA_ROW, ValidationError
from ..validation.record import normalize_record, validate_record
from ..validation.schema import missing_headers, validate_schema
from .aggregator import aggregate
from .progress import RowProgress

logger = logging.getLogger(__name__)

"""Batch ingestion pipeline.

Coordinates one upload end to end:
1. Header check once on the parsed columns. On failure, on an upload with
   no data rows, or on a file that is not well-formed CSV, a single row-0
   "format" error is returned and no row is looked at
2. Every data row is validated (row numbers are 1-based, header excluded)
3. Any error rejects the whole batch: only the errors are returned
4. Otherwise all transactions are aggregated into a BatchTransfer

Rejections are returned as data. Exceptions are raised only for files that
cannot be opened (CsvReadError) and invalid submission inputs (SubmissionError).
"""

__all__ = [
    "FORMAT_FIELD",
    "FORMAT_MESSAGE",
    "SubmissionError",
    "check_submission",
    "ingest_table",
    "run_pipeline",
    "run_pipeline_async",
    "run_file",
]

DEFAULT_FILE_NAME = "<upload>"
FORMAT_FIELD = "format"
FORMAT_MESSAGE = "Invalid CSV format. Please check the column headers."


class SubmissionError(Exception):
    """Raised when the batch name or approver is not acceptable."""


def check_submission(name: str, approver: str, approvers: Iterable[str]) -> None:
    """Validate the operator inputs that accompany an upload.

    Raises:
        SubmissionError: if the name is blank or the approver is not configured
    """
    if not name or not name.strip():
        raise SubmissionError("Batch name is required")
    if not approver or not approver.strip():
        raise SubmissionError("Approver is required")
    if approver not in set(approvers):
        raise SubmissionError(f"Unknown approver: {approver}")


def _schema_failure(file_name: str) -> IngestionResult:
    return IngestionResult(
        file_name=file_name,
        total_rows=0,
        errors=(ValidationError(SCHEMA_ROW, FORMAT_FIELD, FORMAT_MESSAGE),),
    )


def ingest_table(table: ParsedTable, file_name: str = DEFAULT_FILE_NAME) -> IngestionResult:
    """Validate a parsed upload and partition it into transactions or errors.

    The returned result never carries a batch; see run_pipeline.
    """
    log = upload_logger(logger, file_name)
    if not validate_schema(table.columns):
        log.warning(f"missing columns {missing_headers(table.columns)}")
        return _schema_failure(file_name)

    if not table.rows:
        log.warning("no data rows")
        return _schema_failure(file_name)

    try:
        records: list[RawRecord] = [adapt_record(row) for row in table.rows]
    except MissingColumnsError as e:
        log.warning(str(e))
        return _schema_failure(file_name)

    errors: list[ValidationError] = []
    transactions: list[Transaction] = []
    with RowProgress(len(records)) as progress:
        for index, record in enumerate(records, start=1):
            record_errors = validate_record(record, index)
            if record_errors:
                errors.extend(record_errors)
            else:
                transactions.append(normalize_record(record))
            progress.advance(rejected=bool(record_errors))

    if errors:
        log.info(
            f"rejected rows={len(records)} errors={len(errors)} "
            f"bad_rows={len({e.row for e in errors})}"
        )
        # All-or-nothing: valid rows of a rejected upload are dropped
        return IngestionResult(file_name=file_name, total_rows=len(records), errors=tuple(errors))

    return IngestionResult(
        file_name=file_name,
        total_rows=len(records),
        transactions=tuple(transactions),
    )


def _log_errors(result: IngestionResult, error_log: ErrorLogBuffer | None) -> None:
    if error_log is None:
        return
    for error in result.errors:
        error_log.append(ErrorRecord.create(result.file_name, error))


def _malformed(file_name: str, exc: MalformedCsvError, error_log: ErrorLogBuffer | None) -> IngestionResult:
    upload_logger(logger, file_name).warning(str(exc))
    result = _schema_failure(file_name)
    _log_errors(result, error_log)
    return result


def run_pipeline(
    table: ParsedTable,
    name: str,
    approver: str,
    *,
    file_name: str = DEFAULT_FILE_NAME,
    error_log: ErrorLogBuffer | None = None,
) -> IngestionResult:
    """Run validation and, when every row passes, aggregation.

    Args:
        table: Parsed upload
        name: Batch label (already checked by the caller)
        approver: Approver identity (already checked by the caller)
        file_name: Name used in logs and error records
        error_log: Optional buffer receiving one ErrorRecord per error

    Returns:
        IngestionResult: accepted (batch set) or rejected (errors only)
    """
    result = ingest_table(table, file_name)
    if result.errors:
        _log_errors(result, error_log)
        return result

    batch = aggregate(result.transactions, name, approver)
    upload_logger(logger, file_name).info(
        f"accepted payments={batch.number_of_payments} total={batch.total_amount}"
    )
    return replace(result, batch=batch)


def _source_name(source: CsvSource) -> str:
    if isinstance(source, (str, Path)):
        return Path(source).name
    name = getattr(source, "name", None)
    if isinstance(name, str):
        return Path(name).name
    return DEFAULT_FILE_NAME


def run_file(
    source: CsvSource,
    name: str,
    approver: str,
    *,
    error_log: ErrorLogBuffer | None = None,
) -> IngestionResult:
    """Read ``source`` and run the pipeline on it.

    A file that is not well-formed CSV comes back as a format rejection.

    Raises:
        CsvReadError: if the file cannot be opened
    """
    file_name = _source_name(source)
    try:
        table = read_csv_file(source)
    except MalformedCsvError as e:
        return _malformed(file_name, e, error_log)
    return run_pipeline(table, name, approver, file_name=file_name, error_log=error_log)


async def run_pipeline_async(
    source: CsvSource,
    name: str,
    approver: str,
    *,
    error_log: ErrorLogBuffer | None = None,
) -> IngestionResult:
    """Await the parse once, then run the synchronous pipeline on the full table."""
    file_name = _source_name(source)
    try:
        table = await read_csv_async(source)
    except MalformedCsvError as e:
        return _malformed(file_name, e, error_log)
    return run_pipeline(table, name, approver, file_name=file_name, error_log=error_log)
