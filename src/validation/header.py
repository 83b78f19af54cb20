from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..models.role_row import REQUIRED_COLUMNS
from ..models.validation_error import ValidationError
from ..models.validation_result import ValidationResult


def validate_header(
    header: Iterable[str], required: Sequence[str] = REQUIRED_COLUMNS
) -> ValidationResult:
    """Check that every required column is present in the header.

    Extra columns are ignored. Missing columns are reported in a single error,
    listed in ``required`` order.
    """
    present = set(header)
    missing = [c for c in required if c not in present]
    if not missing:
        return ValidationResult.valid()
    return ValidationResult.invalid([ValidationError.missing_columns(missing)])
