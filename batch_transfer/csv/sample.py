from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd

from ..models.transaction import REQUIRED_COLUMNS

"""Synthetic batch upload generation.

Produces CSV uploads in the accepted layout for demos and throughput
checks. Optionally corrupts a number of rows (one field each, cycling over
the four columns) so rejection paths can be exercised at scale.
"""

__all__ = [
    "generate_batch_frame",
    "write_sample_csv",
]

_FIRST_NAMES = ["John", "Jane", "Michael", "Sarah", "Robert", "Emily", "David", "Anna"]
_LAST_NAMES = ["Smith", "Doe", "Johnson", "Williams", "Brown", "Garcia", "Miller", "Lee"]

# Corruption applied per column, in REQUIRED_COLUMNS order
_CORRUPT_VALUES = ["17-03-2024", "000-12345-01", "   ", "-5"]


def generate_batch_frame(rows: int, *, invalid_rows: int = 0, seed: int = 42) -> pd.DataFrame:
    """Generate a DataFrame of transfer rows with the required columns.

    Args:
        rows: Number of data rows
        invalid_rows: Number of rows to corrupt (spread evenly, capped at rows)
        seed: Random seed for reproducible data

    Returns:
        DataFrame whose cells are all strings
    """
    rng = np.random.default_rng(seed)

    dates = pd.date_range("2024-01-01", "2024-12-31", freq="D")
    picked_dates = rng.choice(len(dates), rows)
    accounts = rng.integers(0, 10**9, rows)
    suffixes = rng.integers(0, 100, rows)
    first = rng.choice(_FIRST_NAMES, rows)
    last = rng.choice(_LAST_NAMES, rows)
    amounts = np.round(rng.uniform(0.01, 9999.99, rows), 2)

    data = {
        REQUIRED_COLUMNS[0]: [dates[i].strftime("%Y-%m-%d") for i in picked_dates],
        REQUIRED_COLUMNS[1]: [f"000-{a:09d}-{s:02d}" for a, s in zip(accounts, suffixes)],
        REQUIRED_COLUMNS[2]: [f"{f} {l}" for f, l in zip(first, last)],
        REQUIRED_COLUMNS[3]: [f"{a:.2f}" for a in amounts],
    }
    df = pd.DataFrame(data, columns=list(REQUIRED_COLUMNS))

    invalid_rows = min(max(invalid_rows, 0), rows)
    if invalid_rows:
        positions = np.linspace(0, rows - 1, invalid_rows).round().astype(int)
        for n, pos in enumerate(positions):
            col = n % len(REQUIRED_COLUMNS)
            df.iat[int(pos), col] = _CORRUPT_VALUES[col]
    return df


def write_sample_csv(output_path: Path, rows: int, *, invalid_rows: int = 0, seed: int = 42) -> Path:
    """Write a synthetic upload to ``output_path`` and return the path."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = generate_batch_frame(rows, invalid_rows=invalid_rows, seed=seed)
    df.to_csv(output_path, index=False)
    return output_path
