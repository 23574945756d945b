"""Domain models for the batch transfer ingestion pipeline.

This package contains all domain model classes used throughout the application.
"""

from .batch_transfer import BatchTransfer
from .error_record import ErrorRecord
from .ingestion_result import IngestionResult
from .transaction import RawRecord, Transaction, TransactionStatus
from .validation_error import ValidationError

__all__ = [
    # Records
    "RawRecord",
    "Transaction",
    "TransactionStatus",
    # Results
    "BatchTransfer",
    "IngestionResult",
    # Errors
    "ValidationError",
    "ErrorRecord",
]
