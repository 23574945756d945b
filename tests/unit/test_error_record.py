from __future__ import annotations

import json

from batch_transfer.models import ErrorRecord, ValidationError

"""Unit tests for ErrorRecord model."""


def test_error_record_schema_row_zero_support():
    """ErrorRecord keeps row=0 for whole-file errors."""
    rec = ErrorRecord.create(
        file="upload.csv",
        error=ValidationError(0, "format", "Invalid CSV format. Please check the column headers."),
    )

    assert rec.row == 0
    assert rec.file == "upload.csv"
    assert rec.field == "format"

    data = json.loads(rec.to_json_line())
    assert data["row"] == 0
    assert "timestamp" in data and data["timestamp"].endswith("Z")
    assert set(data.keys()) == {"timestamp", "file", "row", "field", "message"}


def test_error_record_positive_row_number():
    rec = ErrorRecord.create("batch.csv", ValidationError(42, "Amount", "Amount must be a positive number"))
    assert rec.row == 42
    data = json.loads(rec.to_json_line())
    assert data["row"] == 42
    assert data["message"] == "Amount must be a positive number"


def test_error_record_keeps_non_ascii():
    rec = ErrorRecord.create("überweisung.csv", ValidationError(1, "Account Holder Name", "leer"))
    assert "überweisung.csv" in rec.to_json_line()
