"""Domain models for the RBAC role CSV validator."""

from .role_row import COLUMNS, NO_NAME, REQUIRED_COLUMNS, RoleRow, display_name, line_number
from .run_result import RunResult
from .validation_error import ErrorKind, ValidationError
from .validation_result import RowOutcome, ValidationResult

__all__ = [
    # Schema constants
    "COLUMNS",
    "REQUIRED_COLUMNS",
    "NO_NAME",
    "RoleRow",
    "display_name",
    "line_number",
    # Validation models
    "ErrorKind",
    "ValidationError",
    "RowOutcome",
    "ValidationResult",
    "RunResult",
]
