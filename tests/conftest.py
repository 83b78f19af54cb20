# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from src.logging.init import reset_logging

HEADER = (
    "operation,name,description,disabled,owner,accessProfiles,entitlements,"
    "requestable,commentsRequired,approvalScheme"
)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        for var in ("RBAC_VALIDATOR_FILE", "RBAC_VALIDATOR_REPORT_DIR"):
            monkeypatch.delenv(var, raising=False)
        yield p


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def valid_row() -> dict[str, str | None]:
    return {
        "operation": "createRole",
        "name": "Finance Approver",
        "description": "Approves finance requests",
        "disabled": "false",
        "owner": "jdoe",
        "accessProfiles": "AP-Finance;AP-Reports",
        "entitlements": "AD:memberOf:CN=Finance,OU=Groups",
        "requestable": "TRUE",
        "commentsRequired": None,
        "approvalScheme": "manager;owner",
    }


@pytest.fixture()
def write_csv(temp_workdir: Path):
    def _write(name: str, lines: list[str]) -> Path:
        p = temp_workdir / "data" / name
        p.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return p
    return _write


@pytest.fixture()
def valid_csv(write_csv) -> Path:
    return write_csv(
        "roles.csv",
        [
            HEADER,
            "createRole,Role A,First,false,alice,AP-1,AD:memberOf:CN=A,true,,manager",
            "createRole,Role B,Second,,bob,,SAP:role:Z_ALL;AD:memberOf:CN=B,,TRUE,",
            "createRole,Role C,Third,TRUE,carol,AP-2;AP-3,,False,false,owner;manager",
        ],
    )


@pytest.fixture()
def sample_config_yaml() -> str:
    return """default_file: data/roles.csv
report_directory: reports
encoding: utf-8
delimiter: ","
color: never
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "validator.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg
