from __future__ import annotations

from pathlib import Path

from batch_transfer.cli.__main__ import main as cli_main
from batch_transfer.logging.init import reset_logging


def test_cli_debug_mode(write_config: Path, valid_csv: Path, capsys):
    """--debug emits DEBUG lines, including the ledger append after acceptance."""
    reset_logging()

    code = cli_main([str(valid_csv), "--name", "b", "--approver", "Jane Doe", "--debug"])

    out = capsys.readouterr().out
    assert code == 0
    assert "DEBUG debug mode enabled" in out
    assert "DEBUG ledger transactions=3 batches=1" in out
    reset_logging()


def test_cli_without_debug_hides_debug_lines(write_config: Path, valid_csv: Path, capsys):
    reset_logging()

    code = cli_main([str(valid_csv), "--name", "b", "--approver", "Jane Doe"])

    out = capsys.readouterr().out
    assert code == 0
    assert "DEBUG" not in out
