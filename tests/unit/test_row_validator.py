from __future__ import annotations

import pytest

from src.models.validation_error import ErrorKind
from src.validation.row import validate_row


def test_valid_row_has_no_errors(valid_row):
    assert validate_row(valid_row, 0) == []


def test_line_number_is_position_plus_two(valid_row):
    valid_row["operation"] = "deleteRole"
    errors = validate_row(valid_row, 5)
    assert len(errors) == 1
    assert errors[0].line == 7
    assert errors[0].kind is ErrorKind.ROW_FIELD


@pytest.mark.parametrize("op", ["CreateRole", "", None, "createrole", "create Role"])
def test_operation_rule_fires_once_with_actual_and_expected(valid_row, op):
    valid_row["operation"] = op
    errors = validate_row(valid_row, 0)
    assert len(errors) == 1
    assert errors[0].field == "operation"
    shown = (op or "").strip()
    assert f'"{shown}"' in errors[0].message
    assert '"createRole"' in errors[0].message


def test_operation_is_trimmed(valid_row):
    valid_row["operation"] = "  createRole  "
    assert validate_row(valid_row, 0) == []


def test_operation_key_missing(valid_row):
    del valid_row["operation"]
    errors = validate_row(valid_row, 0)
    assert [e.field for e in errors] == ["operation"]


@pytest.mark.parametrize("field", ["disabled", "requestable", "revokeCommentsRequired", "commentsRequired"])
def test_boolean_field_message(valid_row, field):
    valid_row[field] = " maybe "
    errors = validate_row(valid_row, 1)
    assert len(errors) == 1
    assert errors[0].to_message() == (
        f"[Line 3] Finance Approver: The column '{field}' value is invalid \"maybe\""
        " - expected: true, false or null"
    )


def test_semicolon_list_reports_value(valid_row):
    valid_row["approvalScheme"] = "manager;;owner"
    errors = validate_row(valid_row, 0)
    assert len(errors) == 1
    assert errors[0].message == (
        "The column 'approvalScheme' value is invalid or contains unexpected format - "
        "\"manager;;owner\", expected values separate by ';'"
    )


def test_entitlements_reported_once_for_several_bad_pieces(valid_row):
    valid_row["entitlements"] = "src:attr;other;AD:memberOf:CN=X"
    errors = validate_row(valid_row, 0)
    assert len(errors) == 1
    assert errors[0].message == (
        "The column 'entitlements' value is invalid \"src:attr;other;AD:memberOf:CN=X\""
        " - expected: source:attribute:value"
    )


def test_entitlements_absent_passes_empty_fails(valid_row):
    valid_row["entitlements"] = None
    assert validate_row(valid_row, 0) == []
    del valid_row["entitlements"]
    assert validate_row(valid_row, 0) == []
    valid_row["entitlements"] = ""
    assert [e.field for e in validate_row(valid_row, 0)] == ["entitlements"]


def test_multiple_errors_in_rule_order(valid_row):
    valid_row.update(
        {
            "operation": "updateRole",
            "commentsRequired": "nope",
            "disabled": "x",
            "accessProfiles": ";AP",
            "entitlements": "bad",
        }
    )
    errors = validate_row(valid_row, 0)
    assert [e.field for e in errors] == [
        "operation",
        "disabled",
        "commentsRequired",
        "accessProfiles",
        "entitlements",
    ]


@pytest.mark.parametrize("name", [None, "", "   "])
def test_blank_name_uses_placeholder(valid_row, name):
    valid_row["name"] = name
    valid_row["disabled"] = "maybe"
    errors = validate_row(valid_row, 0)
    assert errors[0].name == "<no name>"
    assert errors[0].to_message().startswith("[Line 2] <no name>: ")


def test_name_is_trimmed(valid_row):
    valid_row["name"] = "  Spaced Role "
    valid_row["disabled"] = "maybe"
    assert validate_row(valid_row, 0)[0].name == "Spaced Role"


def test_validation_is_idempotent_and_does_not_mutate(valid_row):
    valid_row.update({"operation": "x", "requestable": "sometimes"})
    snapshot = dict(valid_row)
    first = validate_row(valid_row, 3)
    second = validate_row(valid_row, 3)
    assert first == second
    assert valid_row == snapshot


def test_empty_row_only_fails_operation():
    errors = validate_row({}, 0)
    assert [e.field for e in errors] == ["operation"]
