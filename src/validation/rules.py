from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

"""Field-shape rules for role rows.

Each rule is a ``FieldRule(field, check, template)`` entry. ``check`` receives
the stripped cell value (None when absent) and returns True when it is
acceptable. ``template`` is formatted with ``field`` and ``value`` to build
the error message. Adding a rule means adding one table entry.
"""

__all__ = [
    "EXPECTED_OPERATION",
    "ENTITLEMENT_PATTERN",
    "FieldRule",
    "FIELD_RULES",
    "is_create_role",
    "is_boolean_like",
    "is_semicolon_list",
    "is_entitlement_list",
]

EXPECTED_OPERATION = "createRole"
ENTITLEMENT_PATTERN = re.compile(r"[^:]+:[^:]+:.+")

BOOLEAN_FIELDS = ("disabled", "requestable", "revokeCommentsRequired", "commentsRequired")
LIST_FIELDS = ("approvalScheme", "revokeApprovalScheme", "accessProfiles")


@dataclass(frozen=True)
class FieldRule:
    field: str
    check: Callable[[str | None], bool]
    template: str

    def message(self, value: str | None) -> str:
        return self.template.format(field=self.field, value="" if value is None else value)


def is_create_role(value: str | None) -> bool:
    return value == EXPECTED_OPERATION


def is_boolean_like(value: str | None) -> bool:
    if not value:
        return True
    return value.lower() in ("true", "false")


def is_semicolon_list(value: str | None) -> bool:
    if not value:
        return True
    return all(piece.strip() for piece in value.split(";"))


def is_entitlement_list(value: str | None) -> bool:
    # Only an absent cell is exempt; "" fails the pattern
    if value is None:
        return True
    return all(ENTITLEMENT_PATTERN.fullmatch(piece.strip()) for piece in value.split(";"))


_OPERATION_TEMPLATE = (
    "The '{field}' column value is invalid \"{value}\", expected \"" + EXPECTED_OPERATION + "\""
)
_BOOLEAN_TEMPLATE = "The column '{field}' value is invalid \"{value}\" - expected: true, false or null"
_LIST_TEMPLATE = (
    "The column '{field}' value is invalid or contains unexpected format - \"{value}\", "
    "expected values separate by ';'"
)
_ENTITLEMENT_TEMPLATE = (
    "The column '{field}' value is invalid \"{value}\" - expected: source:attribute:value"
)

# Order matters: errors within a row are reported in table order
FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("operation", is_create_role, _OPERATION_TEMPLATE),
    *(FieldRule(f, is_boolean_like, _BOOLEAN_TEMPLATE) for f in BOOLEAN_FIELDS),
    *(FieldRule(f, is_semicolon_list, _LIST_TEMPLATE) for f in LIST_FIELDS),
    FieldRule("entitlements", is_entitlement_list, _ENTITLEMENT_TEMPLATE),
)
