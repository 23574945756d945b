from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from ..models.batch_transfer import BatchTransfer
from ..models.transaction import Transaction

"""Batch aggregation service.

Builds the BatchTransfer summary from already validated transactions. No
I/O and no re-validation; name/approver checks happen at the submission
boundary before this is called.
"""

__all__ = [
    "aggregate",
]


def aggregate(transactions: Sequence[Transaction], name: str, approver: str) -> BatchTransfer:
    """Aggregate accepted transactions into a BatchTransfer.

    Args:
        transactions: Validated transactions in input order
        name: Batch label
        approver: Approver identity

    Returns:
        BatchTransfer with total, count and average. An empty sequence
        yields total 0, count 0 and average 0.

    Examples:
        >>> from decimal import Decimal
        >>> from batch_transfer.models import Transaction
        >>> txs = [
        ...     Transaction("2024-03-17", "000-000000000-00", "A", Decimal(a))
        ...     for a in ("1000", "2000", "3000")
        ... ]
        >>> batch = aggregate(txs, "March payroll", "Jane Doe")
        >>> batch.total_amount, batch.number_of_payments, batch.average_payment_value
        (Decimal('6000'), 3, Decimal('2000'))
    """
    total_amount = sum((t.amount for t in transactions), Decimal(0))
    number_of_payments = len(transactions)

    # Avoid division by zero
    if number_of_payments > 0:
        average = total_amount / number_of_payments
    else:
        average = Decimal(0)

    return BatchTransfer(
        name=name,
        approver=approver,
        transactions=tuple(transactions),
        total_amount=total_amount,
        number_of_payments=number_of_payments,
        average_payment_value=average,
    )
