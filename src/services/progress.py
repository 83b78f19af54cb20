from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Row progress bar using tqdm (TTY only).

There is one bar per validation run. In non-TTY environments (CI, redirected
output) the bar is disabled so ANSI control sequences don't end up in logs.
The bar writes to stderr, so per-row log lines on stdout remain intact.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ProgressTracker:
    """Progress tracker for rows checked in one CSV file."""

    def __init__(self, total_rows: int, *, description: str = "Validating rows") -> None:
        self.total_rows = total_rows
        self.description = description
        self.current_row = 0
        self.failed_rows = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_rows,
                desc=description,
                unit="row",
                disable=False,
                leave=False,
                position=0,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def advance(self, success: bool = True) -> None:
        self.current_row += 1
        if not success:
            self.failed_rows += 1
        if self.enabled and self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_postfix(failed=self.failed_rows)

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
