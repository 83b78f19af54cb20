from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from ..source.reader import report_name_for

"""Error report writer.

Writes the operator-facing text report next to the run:

    [ROW VALIDATION ERRORS - 2025-08-07 10:12:00]
    <blank line>
    [Line 3] Role A: ...

A new report replaces the previous one for the same source file.
"""

__all__ = [
    "HEADER_SECTION",
    "ROW_SECTION",
    "ErrorReportWriter",
]

HEADER_SECTION = "HEADER"
ROW_SECTION = "ROW"
TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"


class ErrorReportWriter:
    def __init__(self, directory: Path = Path(".")) -> None:
        self.directory = Path(directory)

    def path_for(self, source_path: Path) -> Path:
        return self.directory / report_name_for(source_path)

    def write(self, source_path: Path, section: str, messages: Iterable[str]) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        fp = self.path_for(source_path)
        stamp = datetime.now().strftime(TIMESTAMP_FMT)
        with fp.open("w", encoding="utf-8") as f:
            f.write(f"[{section} VALIDATION ERRORS - {stamp}]\n\n")
            for m in messages:
                f.write(m + "\n")
        return fp
