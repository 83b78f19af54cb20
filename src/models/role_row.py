from __future__ import annotations

from collections.abc import Mapping

"""Column constants and helpers for RBAC role rows.

A role row is the CSV record for one role to create. After the reader has
parsed it, a row is a plain ``dict[str, str | None]``, where ``None`` means
the cell was blank.
"""

__all__ = [
    "COLUMNS",
    "REQUIRED_COLUMNS",
    "NO_NAME",
    "RoleRow",
    "display_name",
    "line_number",
]

RoleRow = Mapping[str, str | None]

# Full expected column set (documentation only, not enforced)
COLUMNS: tuple[str, ...] = (
    "operation",
    "name",
    "description",
    "disabled",
    "owner",
    "accessProfile",
    "entitlements",
    "requestable",
    "approversList",
    "denialCommentsRequired",
    "commentsRequired",
    "revokeApprovalSchemes",
    "tags",
    "segments",
)

# Header gate: these must exist before any row is checked
REQUIRED_COLUMNS: tuple[str, ...] = ("operation", "name", "description", "owner")

NO_NAME = "<no name>"


def display_name(row: RoleRow) -> str:
    """Operator-facing role name: trimmed ``name`` or ``<no name>``."""
    value = row.get("name")
    if value is None or not value.strip():
        return NO_NAME
    return value.strip()


def line_number(position: int) -> int:
    """File line of a data row (0-based position; line 1 is the header)."""
    return position + 2
