from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..logging.error_report import HEADER_SECTION, ROW_SECTION, ErrorReportWriter
from ..logging.init import get_logger
from ..models.run_result import RunResult
from ..models.validation_result import RowOutcome
from ..source.reader import read_role_csv
from ..validation.aggregate import validate_table
from .progress import ProgressTracker

"""Validation run orchestration.

One run covers one CSV file:
1. Read the file (SourceUnavailableError propagates; no report is written)
2. Header gate, then every row, logging a colored success/failure line per row
3. Write the HEADER report on a header failure, the ROW report if any row failed
"""


def _log_outcome(outcome: RowOutcome) -> None:
    logger = get_logger()
    if outcome.is_valid:
        logger.info(f"[Success] Line {outcome.line} - {outcome.name}", extra={"color": "green"})
    else:
        logger.error(f"[ERROR] Line {outcome.line} - {outcome.name}", extra={"color": "red"})


def run_validation(
    source: Path,
    *,
    report_writer: ErrorReportWriter | None = None,
    encoding: str = "utf-8",
    delimiter: str = ",",
) -> RunResult:
    """Validate one role CSV and write an error report when needed.

    Args:
        source: CSV path
        report_writer: Destination for the error report (default: cwd)
        encoding: CSV encoding
        delimiter: CSV field separator

    Returns:
        RunResult with the validation result and counters

    Raises:
        SourceUnavailableError: If the file cannot be read
    """
    source = Path(source)
    writer = report_writer or ErrorReportWriter()
    start_time = datetime.now(UTC)

    table = read_role_csv(source, encoding=encoding, delimiter=delimiter)
    get_logger().debug(f"read {len(table.rows)} rows, header={table.header}")

    with ProgressTracker(len(table.rows)) as progress:
        def on_outcome(outcome: RowOutcome) -> None:
            _log_outcome(outcome)
            progress.advance(success=outcome.is_valid)

        result = validate_table(table.header, table.rows, on_outcome=on_outcome)
        checked_rows = progress.current_row
        invalid_rows = progress.failed_rows

    report_path = None
    if not result.is_valid:
        section = HEADER_SECTION if result.is_header_failure else ROW_SECTION
        report_path = writer.write(source, section, result.messages())

    end_time = datetime.now(UTC)
    return RunResult(
        source=source,
        result=result,
        total_rows=checked_rows,
        invalid_rows=invalid_rows,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        report_path=report_path,
    )
