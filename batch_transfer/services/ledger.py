from __future__ import annotations

from collections.abc import Iterable

from ..models.batch_transfer import BatchTransfer
from ..models.transaction import Transaction

"""In-memory append-only ledger of accepted transactions and batches.

This is the store the pipeline's callers append accepted batches to. The
pipeline itself never touches it. Nothing is persisted; entries are never
replaced or removed and readers get tuple snapshots.
"""

__all__ = [
    "TransactionLedger",
]


class TransactionLedger:
    """Append-only log of transactions and batch transfers.

    - Not thread safe (single caller)
    - Row identity for display is the tuple index of a snapshot
    """

    def __init__(self) -> None:
        self._transactions: list[Transaction] = []
        self._batch_transfers: list[BatchTransfer] = []

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    @property
    def batch_transfers(self) -> tuple[BatchTransfer, ...]:
        return tuple(self._batch_transfers)

    def add_transactions(self, transactions: Iterable[Transaction]) -> None:
        self._transactions.extend(transactions)

    def add_batch_transfer(self, batch_transfer: BatchTransfer) -> None:
        self._batch_transfers.append(batch_transfer)

    def record_batch(self, batch_transfer: BatchTransfer) -> None:
        """Append a batch and its transactions in one call."""
        self.add_transactions(batch_transfer.transactions)
        self.add_batch_transfer(batch_transfer)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._transactions)
