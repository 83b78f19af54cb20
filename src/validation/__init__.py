"""Validation engine: header gate, row rules, aggregation."""

from .aggregate import aggregate, iter_row_outcomes, validate_table
from .header import validate_header
from .row import validate_row

__all__ = [
    "validate_header",
    "validate_row",
    "iter_row_outcomes",
    "aggregate",
    "validate_table",
]
