from __future__ import annotations

from ..models.run_result import RunResult

"""SUMMARY line rendering.

Format:
    SUMMARY rows=<n> valid=<v> invalid=<i> errors=<e> elapsed_sec=<s>
"""


def _format_seconds(seconds: float) -> str:
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        # avoid scientific notation
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


def render_summary_line(run: RunResult) -> str:
    """Render the SUMMARY line for one run.

    Examples:
        >>> from datetime import datetime, timezone
        >>> from pathlib import Path
        >>> from src.models.validation_result import ValidationResult
        >>> t = datetime(2025, 8, 7, 10, 0, 0, tzinfo=timezone.utc)
        >>> run = RunResult(
        ...     source=Path("roles.csv"), result=ValidationResult.valid(),
        ...     total_rows=3, invalid_rows=0, start_time=t, end_time=t,
        ...     elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(run)
        'SUMMARY rows=3 valid=3 invalid=0 errors=0 elapsed_sec=2'
    """
    return (
        f"SUMMARY rows={run.total_rows} "
        f"valid={run.valid_rows} "
        f"invalid={run.invalid_rows} "
        f"errors={run.error_count} "
        f"elapsed_sec={_format_seconds(run.elapsed_seconds)}"
    )
