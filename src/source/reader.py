from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

"""CSV row source for the role validator.

The first line is the header and every following line is one role row.
Blank cells become ``None`` (absent). Literal strings such as ``NA`` or
``null`` are kept as text, because the validator judges them itself.
Blank lines stay in as all-None rows so positions keep matching file lines.
An empty file yields an empty header, which the header gate then reports.
"""

__all__ = [
    "SourceUnavailableError",
    "RoleTable",
    "read_role_csv",
    "report_name_for",
]

REPORT_PREFIX = "ERRORS REPORT - "


class SourceUnavailableError(Exception):
    """Raised when the CSV file is missing, unreadable or not parseable."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass
class RoleTable:
    header: list[str]
    rows: list[dict[str, str | None]]


def _cell(value: Any) -> str | None:
    if pd.isna(value):
        return None
    return str(value)


def read_role_csv(path: Path, *, encoding: str = "utf-8", delimiter: str = ",") -> RoleTable:
    """Read a role CSV into a header list and row dicts.

    Parameters
    ----------
    path: CSV file path
    encoding: file encoding
    delimiter: field separator
    """
    path = Path(path)
    if not path.is_file():
        raise SourceUnavailableError(path, "not found or does not exist")
    try:
        df = pd.read_csv(
            path,
            sep=delimiter,
            dtype=str,
            encoding=encoding,
            index_col=False,
            keep_default_na=False,
            na_values=[""],
            skip_blank_lines=False,
        )
    except pd.errors.EmptyDataError:
        # zero-byte file: no header at all, left for the header gate to report
        return RoleTable(header=[], rows=[])
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise SourceUnavailableError(path, f"cannot read CSV: {e}") from e

    header = [str(c).strip() for c in df.columns]
    rows: list[dict[str, str | None]] = []
    for raw in df.itertuples(index=False, name=None):
        rows.append({col: _cell(val) for col, val in zip(header, raw, strict=True)})
    return RoleTable(header=header, rows=rows)


def report_name_for(path: Path) -> str:
    """``ERRORS REPORT - <basename without extension>.txt``"""
    return f"{REPORT_PREFIX}{Path(path).stem}.txt"
