from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from ..models.batch_transfer import BatchTransfer
from ..models.ingestion_result import IngestionResult
from ..models.validation_error import ValidationError

"""Summary and report rendering for batch transfer uploads.

SUMMARY line format:
    accepted: SUMMARY file={name} rows={n} status=accepted payments={n} total={x.xx} average={x.xx}
    rejected: SUMMARY file={name} rows={n} status=rejected errors={n}

Error report format (one line per error, input order):
    Row {row}: {field} - {message}
"""

__all__ = [
    "format_currency",
    "render_summary_line",
    "render_error_report",
    "render_batch_details",
]


def _two_places(value: Decimal) -> str:
    return f"{value:.2f}"


def format_currency(value: Decimal, symbol: str = "$") -> str:
    """Format an amount for display.

    Examples:
        >>> from decimal import Decimal
        >>> format_currency(Decimal("1234.5"))
        '$1,234.50'
    """
    return f"{symbol}{value:,.2f}"


def render_summary_line(result: IngestionResult) -> str:
    """Render the SUMMARY line for one upload.

    Args:
        result: Pipeline outcome

    Returns:
        Formatted SUMMARY line string
    """
    head = f"SUMMARY file={result.file_name} rows={result.total_rows}"
    if result.accepted and result.batch is not None:
        batch = result.batch
        return (
            f"{head} status=accepted "
            f"payments={batch.number_of_payments} "
            f"total={_two_places(batch.total_amount)} "
            f"average={_two_places(batch.average_payment_value)}"
        )
    return f"{head} status=rejected errors={len(result.errors)}"


def render_error_report(errors: Iterable[ValidationError]) -> list[str]:
    return [e.describe() for e in errors]


def render_batch_details(batch: BatchTransfer, currency_symbol: str = "$") -> list[str]:
    """Render the review summary shown before a batch is confirmed."""
    return [
        f"Name: {batch.name}",
        f"Approver: {batch.approver}",
        f"Total Amount: {format_currency(batch.total_amount, currency_symbol)}",
        f"Number of Payments: {batch.number_of_payments}",
        f"Average Payment Value: {format_currency(batch.average_payment_value, currency_symbol)}",
    ]
