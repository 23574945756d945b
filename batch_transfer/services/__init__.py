"""Pipeline services: aggregation, orchestration, ledger, progress and reporting."""

from .aggregator import aggregate
from .ledger import TransactionLedger
from .pipeline import (
    SubmissionError,
    check_submission,
    ingest_table,
    run_file,
    run_pipeline,
    run_pipeline_async,
)

__all__ = [
    "aggregate",
    "TransactionLedger",
    "SubmissionError",
    "check_submission",
    "ingest_table",
    "run_file",
    "run_pipeline",
    "run_pipeline_async",
]
