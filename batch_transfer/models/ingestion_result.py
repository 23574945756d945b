from __future__ import annotations

from dataclasses import dataclass

from .batch_transfer import BatchTransfer
from .transaction import Transaction
from .validation_error import ValidationError

"""Ingestion result model for the batch transfer pipeline.

IngestionResult is what the pipeline hands back to its caller: either an
accepted batch (errors empty, batch set) or a rejection (errors non-empty,
no transactions, no batch). Partial batches are never returned.
"""

__all__ = [
    "IngestionResult",
]


@dataclass(frozen=True)
class IngestionResult:
    """Outcome of ingesting one uploaded file."""
    file_name: str  # Uploaded file name (or "<upload>" for in-memory payloads)
    total_rows: int  # Data rows seen (0 when the header check failed)
    transactions: tuple[Transaction, ...] = ()
    errors: tuple[ValidationError, ...] = ()
    batch: BatchTransfer | None = None  # Set only for accepted batches

    @property
    def accepted(self) -> bool:
        return not self.errors and self.batch is not None

    @property
    def schema_failed(self) -> bool:
        return any(e.is_schema_error for e in self.errors)
