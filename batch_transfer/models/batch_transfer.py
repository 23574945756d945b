from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from .transaction import Transaction

"""BatchTransfer aggregate model.

A BatchTransfer is created once per accepted upload by the batch aggregator
and handed to the ledger unchanged.
"""

__all__ = [
    "BatchTransfer",
]


@dataclass(frozen=True)
class BatchTransfer:
    """Aggregate of one submitted batch.

    Invariants (guaranteed by services.aggregator.aggregate):
    - number_of_payments == len(transactions)
    - total_amount == sum of transaction amounts
    - average_payment_value == total_amount / number_of_payments (0 when empty)
    """
    name: str  # Operator supplied label
    approver: str  # Selected approver identity
    transactions: tuple[Transaction, ...]
    total_amount: Decimal
    number_of_payments: int
    average_payment_value: Decimal

    def to_dict(self) -> dict[str, Any]:
        """Render the external (camelCase) shape handed to the batch store."""
        return {
            "name": self.name,
            "approver": self.approver,
            "transactions": [t.to_dict() for t in self.transactions],
            "totalAmount": float(self.total_amount),
            "numberOfPayments": self.number_of_payments,
            "averagePaymentValue": float(self.average_payment_value),
        }
