# Shared pytest fixtures
from __future__ import annotations
import tempfile
from collections.abc import Callable
from pathlib import Path
import pytest

HEADER = "Transaction Date,Account Number,Account Holder Name,Amount"


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("BATCH_TRANSFER_CONFIG", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """approvers:
  - John Smith
  - Jane Doe
  - Michael Johnson
  - Sarah Williams
  - Robert Brown
currency_symbol: $
error_log_directory: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "batch_transfer.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def write_csv(temp_workdir: Path) -> Callable[..., Path]:
    """Write a CSV under data/; ``lines`` excludes the header unless header= is given."""
    def _write(name: str, lines: list[str], header: str | None = HEADER) -> Path:
        p = temp_workdir / "data" / name
        content = [header] if header is not None else []
        content.extend(lines)
        p.write_text("\n".join(content) + "\n", encoding="utf-8")
        return p
    return _write


@pytest.fixture()
def valid_csv(write_csv) -> Path:
    return write_csv(
        "batch.csv",
        [
            "2024-03-17,000-000000000-00,John Doe,1000",
            "2024-03-18,000-123456789-01,Jane Roe,2000",
            "2024-03-19,000-987654321-99,Max Mustermann,3000",
        ],
    )
