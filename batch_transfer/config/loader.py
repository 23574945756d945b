from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader.

Responsibilities:
- Load the YAML config (default config/batch_transfer.yml)
- Validate it against the bundled JSON schema
- Apply defaults (currency_symbol="$", error_log_directory="./logs")

Path resolution order: explicit path (CLI --config) > BATCH_TRANSFER_CONFIG
environment variable > default path.
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/batch_transfer.yml")
CONFIG_ENV_VAR = "BATCH_TRANSFER_CONFIG"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class TransferConfig:
    approvers: tuple[str, ...]  # Identities allowed to approve a batch
    currency_symbol: str = "$"  # Display only, no conversion
    error_log_directory: str = "./logs"


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: if the schema file is missing or invalid, or the data
            fails validation (missing keys, wrong types, extra keys)
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def resolve_config_path(explicit: Path | str | None = None) -> Path:
    if explicit is not None:
        return Path(explicit)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: Path) -> TransferConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    return TransferConfig(
        approvers=tuple(data["approvers"]),
        currency_symbol=data.get("currency_symbol", "$"),
        error_log_directory=data.get("error_log_directory", "./logs"),
    )
