from __future__ import annotations

import re
from decimal import Decimal

from batch_transfer.models import IngestionResult, Transaction, ValidationError
from batch_transfer.services.aggregator import aggregate
from batch_transfer.services.summary import (
    format_currency,
    render_batch_details,
    render_error_report,
    render_summary_line,
)

"""Unit tests for summary and report rendering."""

ACCEPTED_PATTERN = re.compile(
    r"^SUMMARY\s+file=(\S+)\s+rows=([0-9]+)\s+status=accepted\s+payments=([0-9]+)\s+"
    r"total=([0-9]+\.[0-9]{2})\s+average=([0-9]+\.[0-9]{2})$"
)
REJECTED_PATTERN = re.compile(
    r"^SUMMARY\s+file=(\S+)\s+rows=([0-9]+)\s+status=rejected\s+errors=([0-9]+)$"
)


def _accepted(*amounts: str) -> IngestionResult:
    txs = tuple(
        Transaction("2024-03-17", "000-000000000-00", "John Doe", Decimal(a)) for a in amounts
    )
    return IngestionResult("batch.csv", len(txs), transactions=txs, batch=aggregate(txs, "March", "Jane Doe"))


def test_render_summary_line_accepted():
    line = render_summary_line(_accepted("1000", "2000", "3000"))
    match = ACCEPTED_PATTERN.match(line)
    assert match, f"SUMMARY line should match regex: {line}"
    assert line == "SUMMARY file=batch.csv rows=3 status=accepted payments=3 total=6000.00 average=2000.00"


def test_render_summary_line_rounds_average():
    line = render_summary_line(_accepted("1", "1", "1.01"))
    assert line.endswith("total=3.01 average=1.00")


def test_render_summary_line_rejected():
    result = IngestionResult(
        "bad.csv", 2,
        errors=(ValidationError(2, "Account Number", "m"), ValidationError(2, "Amount", "m")),
    )
    line = render_summary_line(result)
    assert REJECTED_PATTERN.match(line)
    assert line == "SUMMARY file=bad.csv rows=2 status=rejected errors=2"


def test_render_summary_line_schema_failure():
    result = IngestionResult("bad.csv", 0, errors=(ValidationError(0, "format", "m"),))
    assert render_summary_line(result) == "SUMMARY file=bad.csv rows=0 status=rejected errors=1"


def test_render_error_report_keeps_order():
    errors = [
        ValidationError(1, "Transaction Date", "Invalid date format. Use YYYY-MM-DD"),
        ValidationError(3, "Amount", "Amount must be a positive number"),
    ]
    assert render_error_report(errors) == [
        "Row 1: Transaction Date - Invalid date format. Use YYYY-MM-DD",
        "Row 3: Amount - Amount must be a positive number",
    ]


def test_format_currency():
    assert format_currency(Decimal("1000")) == "$1,000.00"
    assert format_currency(Decimal("1234567.891"), "€") == "€1,234,567.89"


def test_render_batch_details():
    result = _accepted("1000", "2000")
    assert result.batch is not None
    assert render_batch_details(result.batch) == [
        "Name: March",
        "Approver: Jane Doe",
        "Total Amount: $3,000.00",
        "Number of Payments: 2",
        "Average Payment Value: $1,500.00",
    ]
