from __future__ import annotations

from collections.abc import Sequence

from ..models.role_row import RoleRow, display_name, line_number
from ..models.validation_error import ValidationError
from .rules import FIELD_RULES, FieldRule


def _stripped(row: RoleRow, field: str) -> str | None:
    value = row.get(field)
    return value.strip() if value is not None else None


def validate_row(
    row: RoleRow, position: int, rules: Sequence[FieldRule] = FIELD_RULES
) -> list[ValidationError]:
    """Apply every field rule to one row and return its violations.

    ``position`` is the 0-based data row index; reported lines are
    ``position + 2``. An empty list means the row is valid. Rules never stop
    early, so a row can report several independent problems.
    """
    line = line_number(position)
    name = display_name(row)
    errors: list[ValidationError] = []
    for rule in rules:
        value = _stripped(row, rule.field)
        if not rule.check(value):
            errors.append(
                ValidationError(line=line, name=name, field=rule.field, message=rule.message(value))
            )
    return errors
