from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from ..csv.reader import adapt_record
from ..models.transaction import (
    ACCOUNT_HOLDER_NAME,
    ACCOUNT_NUMBER,
    AMOUNT,
    TRANSACTION_DATE,
    RawRecord,
    Transaction,
    TransactionStatus,
)
from ..models.validation_error import ValidationError

"""Per-row validation and normalization.

Four independent field rules run on every row and their failures
accumulate; a row may carry zero to four errors. Validation never mutates
anything. normalize_record builds the Transaction once a row reports no
errors.

Rules:
- Transaction Date: exactly YYYY-MM-DD and a real calendar date
- Account Number: 000-#########-## (ASCII digits only)
- Account Holder Name: non-empty after trimming
- Amount: finite decimal strictly greater than zero
"""

__all__ = [
    "DATE_FORMAT",
    "DATE_MESSAGE",
    "ACCOUNT_NUMBER_MESSAGE",
    "ACCOUNT_HOLDER_NAME_MESSAGE",
    "AMOUNT_MESSAGE",
    "validate_record",
    "normalize_record",
    "parse_amount",
]

DATE_FORMAT = "%Y-%m-%d"
_DATE_LAYOUT = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_ACCOUNT_NUMBER = re.compile(r"000-[0-9]{9}-[0-9]{2}")

DATE_MESSAGE = "Invalid date format. Use YYYY-MM-DD"
ACCOUNT_NUMBER_MESSAGE = "Invalid account number format. Use 000-000000000-00"
ACCOUNT_HOLDER_NAME_MESSAGE = "Account holder name cannot be empty"
AMOUNT_MESSAGE = "Amount must be a positive number"


def _is_valid_date(value: str) -> bool:
    # strptime alone accepts single-digit month/day, so the layout is checked first
    if not _DATE_LAYOUT.fullmatch(value):
        return False
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return False
    return True


def parse_amount(value: str) -> Decimal | None:
    """Parse an amount cell; None unless it is a finite number greater than zero."""
    try:
        amount = Decimal(value.strip())
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite() or amount <= 0:
        return None
    return amount


def _as_record(record: RawRecord | Mapping[str, Any]) -> RawRecord:
    if isinstance(record, RawRecord):
        return record
    return adapt_record(record)


def validate_record(record: RawRecord | Mapping[str, Any], row_index: int) -> list[ValidationError]:
    """Check one row against every field rule.

    Args:
        record: The row, typed or as a column-name mapping
        row_index: 1-based data row number attached to every error

    Returns:
        Errors in rule order (date, account number, holder name, amount);
        empty when the row is acceptable
    """
    rec = _as_record(record)
    errors: list[ValidationError] = []

    if not _is_valid_date(rec.transaction_date):
        errors.append(ValidationError(row_index, TRANSACTION_DATE, DATE_MESSAGE))

    if not _ACCOUNT_NUMBER.fullmatch(rec.account_number):
        errors.append(ValidationError(row_index, ACCOUNT_NUMBER, ACCOUNT_NUMBER_MESSAGE))

    if not rec.account_holder_name.strip():
        errors.append(ValidationError(row_index, ACCOUNT_HOLDER_NAME, ACCOUNT_HOLDER_NAME_MESSAGE))

    if parse_amount(rec.amount) is None:
        errors.append(ValidationError(row_index, AMOUNT, AMOUNT_MESSAGE))

    return errors


def normalize_record(record: RawRecord | Mapping[str, Any]) -> Transaction:
    """Build a pending Transaction from a row that passed validate_record.

    Raises:
        ValueError: if the amount is not a positive number (row was not validated)
    """
    rec = _as_record(record)
    amount = parse_amount(rec.amount)
    if amount is None:
        raise ValueError(f"amount is not a positive number: {rec.amount!r}")
    return Transaction(
        transaction_date=rec.transaction_date,
        account_number=rec.account_number,
        account_holder_name=rec.account_holder_name.strip(),
        amount=amount,
        status=TransactionStatus.PENDING,
    )
