from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .validation_error import ErrorKind, ValidationError

"""Result models for header / row validation.

ValidationResult is terminal: the reporting layer consumes it once.
RowOutcome is the per-row record yielded while rows are aggregated, so the
caller can show progress without the validators touching the console.
"""

__all__ = [
    "RowOutcome",
    "ValidationResult",
]


@dataclass(frozen=True)
class RowOutcome:
    position: int  # 0-based data row index
    line: int  # position + 2
    name: str
    errors: tuple[ValidationError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class ValidationResult:
    """Valid (no errors) or Invalid (ordered errors)."""
    errors: tuple[ValidationError, ...] = field(default_factory=tuple)

    @staticmethod
    def valid() -> ValidationResult:
        return ValidationResult()

    @staticmethod
    def invalid(errors: Iterable[ValidationError]) -> ValidationResult:
        errs = tuple(errors)
        if not errs:
            raise ValueError("invalid result requires at least one error")
        return ValidationResult(errors=errs)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def is_header_failure(self) -> bool:
        return any(e.kind is ErrorKind.HEADER for e in self.errors)

    def messages(self) -> list[str]:
        return [e.to_message() for e in self.errors]
