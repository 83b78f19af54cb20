from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence

from ..models.role_row import REQUIRED_COLUMNS, RoleRow, display_name, line_number
from ..models.validation_error import ValidationError
from ..models.validation_result import RowOutcome, ValidationResult
from .header import validate_header
from .row import validate_row

"""Aggregation of per-row results into a single ValidationResult.

``iter_row_outcomes`` is lazy, so the caller can print progress as each row
is checked. ``aggregate`` reduces the outcomes to a result. ``validate_table``
adds the header gate in front.
"""

OutcomeCallback = Callable[[RowOutcome], None]


def iter_row_outcomes(rows: Iterable[RoleRow]) -> Iterator[RowOutcome]:
    for position, row in enumerate(rows):
        yield RowOutcome(
            position=position,
            line=line_number(position),
            name=display_name(row),
            errors=tuple(validate_row(row, position)),
        )


def aggregate(rows: Iterable[RoleRow], on_outcome: OutcomeCallback | None = None) -> ValidationResult:
    """Validate all rows in file order.

    Args:
        rows: Parsed data rows (header excluded)
        on_outcome: Called once per row, in order, before its errors are merged

    Returns:
        Valid if no row produced an error, otherwise Invalid with every
        row's errors concatenated in line order
    """
    errors: list[ValidationError] = []
    for outcome in iter_row_outcomes(rows):
        if on_outcome is not None:
            on_outcome(outcome)
        errors.extend(outcome.errors)
    if not errors:
        return ValidationResult.valid()
    return ValidationResult.invalid(errors)


def validate_table(
    header: Iterable[str],
    rows: Iterable[RoleRow],
    on_outcome: OutcomeCallback | None = None,
    required: Sequence[str] = REQUIRED_COLUMNS,
) -> ValidationResult:
    header_result = validate_header(header, required)
    if not header_result.is_valid:
        return header_result
    return aggregate(rows, on_outcome)
