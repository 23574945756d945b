from __future__ import annotations

import asyncio
from decimal import Decimal
from pathlib import Path

from batch_transfer.csv.reader import read_csv_file
from batch_transfer.models import TransactionStatus
from batch_transfer.services.ledger import TransactionLedger
from batch_transfer.services.pipeline import run_file, run_pipeline, run_pipeline_async

"""End-to-end: accepted uploads from CSV file to ledger."""


def test_single_row_upload_is_accepted(write_csv):
    csv_path = write_csv("one.csv", ["2024-03-17, 000-000000000-00, John Doe, 1000"])

    result = run_file(csv_path, "Test Batch", "John Smith")

    assert result.errors == ()
    assert len(result.transactions) == 1
    tx = result.transactions[0]
    assert tx.amount == 1000
    assert tx.status is TransactionStatus.PENDING
    assert tx.status.value == "pending"
    assert tx.account_holder_name == "John Doe"
    assert tx.error_message is None


def test_accepted_batch_summary_and_ledger(valid_csv: Path):
    result = run_file(valid_csv, "March payroll", "Jane Doe")

    assert result.accepted
    batch = result.batch
    assert batch is not None
    assert batch.total_amount == Decimal("6000")
    assert batch.number_of_payments == 3
    assert batch.average_payment_value == Decimal("2000")

    ledger = TransactionLedger()
    ledger.record_batch(batch)
    assert ledger.transactions == batch.transactions
    assert ledger.batch_transfers == (batch,)


def test_extra_columns_and_reordered_headers(write_csv):
    csv_path = write_csv(
        "reordered.csv",
        ["REF-1,1000.50,Jane Roe,000-123456789-01,2024-03-18"],
        header="Reference,Amount,Account Holder Name,Account Number,Transaction Date",
    )

    result = run_file(csv_path, "b", "Jane Doe")

    assert result.accepted
    tx = result.transactions[0]
    assert tx.transaction_date == "2024-03-18"
    assert tx.account_number == "000-123456789-01"
    assert tx.amount == Decimal("1000.50")


def test_async_and_sync_paths_agree(valid_csv: Path):
    sync_result = run_pipeline(read_csv_file(valid_csv), "b", "Jane Doe", file_name="batch.csv")
    async_result = asyncio.run(run_pipeline_async(valid_csv, "b", "Jane Doe"))

    assert async_result == sync_result


def test_trailing_delimiters_keep_columns_aligned(write_csv):
    csv_path = write_csv("excel_export.csv", [
        "2024-03-17,000-000000000-00,John Doe,1000,",
        "2024-03-18,000-123456789-01,Jane Roe,250.75,",
    ])

    result = run_file(csv_path, "b", "Jane Doe")

    assert result.errors == ()
    assert [t.transaction_date for t in result.transactions] == ["2024-03-17", "2024-03-18"]
    assert [t.account_number for t in result.transactions] == ["000-000000000-00", "000-123456789-01"]
    assert result.batch is not None
    assert result.batch.total_amount == Decimal("1250.75")
