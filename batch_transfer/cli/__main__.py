from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from batch_transfer.config.loader import ConfigError, TransferConfig, load_config, resolve_config_path
from batch_transfer.csv.reader import CsvReadError, read_csv_file
from batch_transfer.logging.error_log import ErrorLogBuffer
from batch_transfer.logging.init import log_summary, setup_logging
from batch_transfer.models.ingestion_result import IngestionResult
from batch_transfer.services.ledger import TransactionLedger
from batch_transfer.services.pipeline import SubmissionError, check_submission, run_file
from batch_transfer.services.summary import (
    render_batch_details,
    render_error_report,
    render_summary_line,
)

"""CLI entrypoint.

Flow:
- Load .env (may point BATCH_TRANSFER_CONFIG at a config file) and config
- Check batch name / approver
- Run the ingestion pipeline on the CSV upload
- Accepted: print batch details and append the batch to the ledger
- Rejected: print the error report and flush the JSON Lines error log
- Always end with one SUMMARY line
"""

EXIT_ACCEPTED = 0
EXIT_REJECTED = 2
EXIT_FATAL = 1


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv; .env values win over the process environment."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Batch transfer CSV ingestion")
    p.add_argument("file", help="CSV upload with Transaction Date, Account Number, Account Holder Name, Amount")
    p.add_argument("--name", default="", help="Batch transfer name")
    p.add_argument("--approver", default="", help="Approver (must be listed in config)")
    p.add_argument("--config", default=None, help="Config YAML path")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print headers & first rows then exit")
    p.add_argument("--json", action="store_true", help="Print the batch or the errors as JSON")
    return p.parse_args(argv)


def _inspect_data(source: Path) -> int:
    try:
        table = read_csv_file(source)
    except CsvReadError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    print(f"FILE: {source.name} rows={table.row_count}")
    print(f"  columns={table.columns}")
    print("  sample_rows=", table.rows[:3])
    return EXIT_ACCEPTED


def _report(result: IngestionResult, cfg: TransferConfig, as_json: bool, logger: logging.Logger) -> None:
    if result.accepted and result.batch is not None:
        if as_json:
            print(json.dumps(result.batch.to_dict(), indent=2))
        else:
            for line in render_batch_details(result.batch, cfg.currency_symbol):
                logger.info(line)
        return
    if as_json:
        print(json.dumps([e.to_dict() for e in result.errors], indent=2))
    else:
        for line in render_error_report(result.errors):
            logger.error(line)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # Only read sys.argv when no argv was given (an empty list means "no args")
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    if args.debug:
        for h in logger.handlers:
            h.setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
        logger.debug("debug mode enabled")

    config_path = resolve_config_path(args.config)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    source = Path(args.file)
    if not source.is_file():
        logger.error(f"file not found: {source}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(source)

    try:
        check_submission(args.name, args.approver, cfg.approvers)
    except SubmissionError as e:
        logger.error(f"submission: {e}")
        return EXIT_FATAL

    logger.info(f"Processing upload: {source}")
    error_log = ErrorLogBuffer(cfg.error_log_directory)
    try:
        result = run_file(source, args.name, args.approver, error_log=error_log)
    except CsvReadError as e:
        logger.error(f"read: {e}")
        return EXIT_FATAL

    _report(result, cfg, args.json, logger)

    if result.accepted and result.batch is not None:
        ledger = TransactionLedger()
        ledger.record_batch(result.batch)
        logger.debug(
            f"ledger transactions={len(ledger.transactions)} batches={len(ledger.batch_transfers)}"
        )
    else:
        log_path = error_log.flush()
        if log_path is not None:
            logger.info(f"error log written: {log_path}")

    log_summary(render_summary_line(result).removeprefix("SUMMARY "))

    return EXIT_ACCEPTED if result.accepted else EXIT_REJECTED


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
