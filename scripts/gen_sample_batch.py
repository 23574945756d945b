#!/usr/bin/env python3
"""Generate a synthetic batch transfer upload (CSV).

The generated file has the header row
``Transaction Date,Account Number,Account Holder Name,Amount`` followed by
``--rows`` data rows. ``--invalid-rows`` corrupts that many rows so the
rejection path can be tried out.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from batch_transfer.csv.sample import write_sample_csv


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate synthetic batch transfer CSV uploads",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 1,000 valid rows
  %(prog)s data/batch.csv --rows 1000

  # 50,000 rows, 25 of them invalid
  %(prog)s data/large.csv --rows 50000 --invalid-rows 25 --seed 123
        """,
    )
    parser.add_argument("output", type=Path, help="Output CSV path")
    parser.add_argument("--rows", type=int, default=1000, help="Number of data rows (default: 1000)")
    parser.add_argument("--invalid-rows", type=int, default=0, help="Rows to corrupt (default: 0)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args(argv)

    if args.rows < 0:
        print("--rows must be >= 0", file=sys.stderr)
        return 1

    path = write_sample_csv(args.output, args.rows, invalid_rows=args.invalid_rows, seed=args.seed)
    print(f"Created CSV file: {path}")
    print(f"  Rows: {args.rows} (+ 1 header row)")
    print(f"  Invalid rows: {min(max(args.invalid_rows, 0), args.rows)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
