from __future__ import annotations

import pytest

from src.models.role_row import COLUMNS, REQUIRED_COLUMNS
from src.models.validation_error import ErrorKind
from src.validation.header import validate_header


def test_full_column_set_is_valid():
    result = validate_header(list(COLUMNS))
    assert result.is_valid
    assert result.errors == ()


def test_extra_columns_are_not_flagged():
    result = validate_header(["operation", "name", "description", "owner", "whatever", "tags"])
    assert result.is_valid


def test_missing_owner_single_error():
    result = validate_header(["operation", "name", "description", "disabled"])
    assert not result.is_valid
    assert len(result.errors) == 1
    err = result.errors[0]
    assert err.kind is ErrorKind.HEADER
    assert err.line == 1
    assert err.field is None
    assert err.to_message() == "[ERROR] The following required columns are missing: owner"


def test_missing_columns_listed_in_required_order():
    # header order must not influence message order
    result = validate_header(["owner", "tags"])
    assert result.messages() == [
        "[ERROR] The following required columns are missing: operation, name, description"
    ]


def test_empty_header_lists_every_required_column():
    result = validate_header([])
    assert result.errors[0].message.endswith(", ".join(REQUIRED_COLUMNS))


@pytest.mark.parametrize(
    "header,expected_valid",
    [
        (["operation", "name", "description", "owner"], True),
        (["owner", "description", "name", "operation"], True),
        (["operation", "name", "description"], False),
        (["Operation", "name", "description", "owner"], False),  # case-sensitive
    ],
)
def test_valid_iff_required_subset(header, expected_valid):
    assert validate_header(header).is_valid is expected_valid
    assert expected_valid is set(REQUIRED_COLUMNS).issubset(header)


def test_custom_required_set():
    result = validate_header(["a"], required=("a", "b"))
    assert result.errors[0].message == "The following required columns are missing: b"
