from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display service with tqdm (TTY only).

Shows row validation progress for large uploads. In non-TTY environments
(CI, piped output) the bar is disabled so no ANSI control sequences reach
the log.
"""

__all__ = [
    "RowProgress",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """Check if TTY output is enabled.

    Returns:
        True if stdout is a TTY and progress should be displayed, False otherwise
    """
    return sys.stdout.isatty()


class RowProgress:
    """Progress tracker over the data rows of one upload."""

    def __init__(self, total_rows: int, *, description: str = "Validating rows") -> None:
        """Initialize row progress.

        Args:
            total_rows: Number of data rows to validate
            description: Description for the progress bar
        """
        self.total_rows = total_rows
        self.description = description
        self.processed = 0
        self.rejected = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_rows,
                desc=description,
                unit="row",
                leave=False,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def advance(self, *, rejected: bool = False) -> None:
        """Mark one row as validated."""
        self.processed += 1
        if rejected:
            self.rejected += 1
        if self.enabled and self.pbar is not None:
            self.pbar.update(1)
            if rejected:
                self.pbar.set_postfix(rejected=self.rejected)

    def close(self) -> None:
        """Close the progress bar."""
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> RowProgress:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
