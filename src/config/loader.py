from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError as SchemaValidationError

"""Config loader for the role validator.

Responsibilities:
- Load an optional YAML config (config/validator.yml by default)
- Validate it against the packaged JSON schema (unknown keys rejected)
- Apply defaults, then environment overrides
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/validator.yml")

DEFAULT_FILE = "Carga RBAC 07-08-2025"

ENV_FILE = "RBAC_VALIDATOR_FILE"
ENV_REPORT_DIR = "RBAC_VALIDATOR_REPORT_DIR"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ValidatorConfig:
    default_file: str = DEFAULT_FILE
    report_directory: str = "."
    encoding: str = "utf-8"
    delimiter: str = ","
    color: str = "auto"  # auto | always | never

    @property
    def color_enabled(self) -> bool | None:
        """True/False when forced, None when it should follow the TTY."""
        if self.color == "always":
            return True
        if self.color == "never":
            return False
        return None


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or invalid, or if the data
            violates it (wrong type, unknown key, bad enum value)
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except SchemaValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _apply_env(cfg: ValidatorConfig) -> ValidatorConfig:
    overrides: dict[str, str] = {}
    if os.getenv(ENV_FILE):
        overrides["default_file"] = os.environ[ENV_FILE]
    if os.getenv(ENV_REPORT_DIR):
        overrides["report_directory"] = os.environ[ENV_REPORT_DIR]
    return replace(cfg, **overrides) if overrides else cfg


def load_config(path: Path | None = None) -> ValidatorConfig:
    """Load validator config.

    With ``path=None`` the default location is used and a missing file simply
    means "defaults". An explicitly given path must exist.
    """
    explicit = path is not None
    cfg_path = Path(path) if explicit else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        if explicit:
            raise ConfigError(f"config file not found: {cfg_path}")
        return _apply_env(ValidatorConfig())
    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {cfg_path}")

    _validate_config_schema(data)

    return _apply_env(ValidatorConfig(**data))
