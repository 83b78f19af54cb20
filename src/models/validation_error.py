from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""ValidationError model.

One violation found in the role CSV. Records are frozen and collected in
discovery order. ``to_message()`` renders the line that goes into the error
report file.
"""

__all__ = [
    "ErrorKind",
    "ValidationError",
    "HEADER_LINE",
]

HEADER_LINE = 1


class ErrorKind(str, Enum):
    HEADER = "HEADER"
    ROW_FIELD = "ROW_FIELD"


@dataclass(frozen=True)
class ValidationError:
    """Structured validation error.

    Attributes:
        line: File line number (1 = header, data rows start at 2)
        name: Role name for readability (``<no name>`` when blank)
        field: Offending column, None for header errors
        message: Rule-specific description without the line/name prefix
        kind: HEADER or ROW_FIELD
    """
    line: int
    name: str | None
    field: str | None
    message: str
    kind: ErrorKind = ErrorKind.ROW_FIELD

    @staticmethod
    def missing_columns(missing: list[str]) -> ValidationError:
        return ValidationError(
            line=HEADER_LINE,
            name=None,
            field=None,
            message=f"The following required columns are missing: {', '.join(missing)}",
            kind=ErrorKind.HEADER,
        )

    def to_message(self) -> str:
        if self.kind is ErrorKind.HEADER:
            return f"[ERROR] {self.message}"
        return f"[Line {self.line}] {self.name}: {self.message}"
