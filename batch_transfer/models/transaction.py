from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

"""Transaction domain models for the batch transfer pipeline.

RawRecord is the typed form of one CSV data row before validation.
Transaction is the normalized, accepted form created only after a RawRecord
passes every field rule.

State transitions of TransactionStatus: pending → (settled | failed).
This package only ever creates PENDING transactions; later transitions
belong to whoever owns the ledger.
"""

__all__ = [
    "TRANSACTION_DATE",
    "ACCOUNT_NUMBER",
    "ACCOUNT_HOLDER_NAME",
    "AMOUNT",
    "REQUIRED_COLUMNS",
    "RawRecord",
    "Transaction",
    "TransactionStatus",
]

# CSV column names
TRANSACTION_DATE = "Transaction Date"
ACCOUNT_NUMBER = "Account Number"
ACCOUNT_HOLDER_NAME = "Account Holder Name"
AMOUNT = "Amount"

REQUIRED_COLUMNS: tuple[str, ...] = (
    TRANSACTION_DATE,
    ACCOUNT_NUMBER,
    ACCOUNT_HOLDER_NAME,
    AMOUNT,
)


class TransactionStatus(Enum):
    """Settlement status of a transaction."""
    PENDING = "pending"
    SETTLED = "settled"
    FAILED = "failed"


@dataclass(frozen=True)
class RawRecord:
    """One CSV data row with the required columns as raw strings."""
    transaction_date: str
    account_number: str
    account_holder_name: str
    amount: str

    def to_mapping(self) -> dict[str, str]:
        """Return the row keyed by CSV column name."""
        return {
            TRANSACTION_DATE: self.transaction_date,
            ACCOUNT_NUMBER: self.account_number,
            ACCOUNT_HOLDER_NAME: self.account_holder_name,
            AMOUNT: self.amount,
        }


@dataclass(frozen=True)
class Transaction:
    """Normalized transfer record accepted from a batch upload.

    Attributes:
        transaction_date: Calendar date in canonical YYYY-MM-DD form
        account_number: Account number matching 000-#########-##
        account_holder_name: Trimmed, non-empty holder name
        amount: Positive amount in currency units
        status: Always PENDING when created by the pipeline
        error_message: Settlement failure reason, unset at creation
    """
    transaction_date: str
    account_number: str
    account_holder_name: str
    amount: Decimal
    status: TransactionStatus = TransactionStatus.PENDING
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the external (camelCase) shape handed to the transaction store."""
        data: dict[str, Any] = {
            "transactionDate": self.transaction_date,
            "accountNumber": self.account_number,
            "accountHolderName": self.account_holder_name,
            "amount": float(self.amount),
            "status": self.status.value,
        }
        # errorMessage is optional in the external shape
        if self.error_message is not None:
            data["errorMessage"] = self.error_message
        return data

    def to_raw_record(self) -> RawRecord:
        """Rebuild the source row this transaction was normalized from."""
        return RawRecord(
            transaction_date=self.transaction_date,
            account_number=self.account_number,
            account_holder_name=self.account_holder_name,
            amount=str(self.amount),
        )
