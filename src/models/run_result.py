from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .validation_result import ValidationResult

"""Run-level result returned by the validation runner to the CLI."""


@dataclass(frozen=True)
class RunResult:
    """Aggregated outcome of one validation run (one CSV file)."""
    source: Path
    result: ValidationResult
    total_rows: int  # data rows checked (0 on header failure)
    invalid_rows: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    report_path: Path | None = None  # set only when an error report was written

    @property
    def valid_rows(self) -> int:
        return self.total_rows - self.invalid_rows

    @property
    def error_count(self) -> int:
        return len(self.result.errors)
