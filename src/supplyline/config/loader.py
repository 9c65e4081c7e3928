"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance.
An empty or absent config yields the default Commander Database layout.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from supplyline.config.settings import (
    AppConfig,
    LoggingConfig,
    MasterTableConfig,
    SourceConfig,
    SupplyCellsConfig,
)


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    """Return a mapping section, treating a null section as empty."""
    value = data.get(key) or {}
    if not isinstance(value, dict):
        msg = f"Config section '{key}' must be a mapping, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return _process_config_values(data) if data else {}


def load_config(
    config_path: Path | None = None,
    base_path: Path | None = None,
) -> AppConfig:
    """
    Load application configuration from YAML file(s).

    Every key is optional. Recognized sections:
        - master_table: sheet_name, name_column, army_url_column, webhook_url_column
        - supply_cells: current_supplies, daily_consumption
        - source: env_var, export_url
        - logging: level, json_output

    Args:
        config_path: Path to the main configuration file. None returns defaults.
        base_path: Optional path to base configuration for inheritance.

    Returns:
        Fully validated AppConfig instance.
    """
    if config_path is None:
        return AppConfig()

    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        base_data = (
            load_yaml(potential_base)
            if potential_base.exists() and potential_base != config_path
            else {}
        )

    main_data = load_yaml(config_path)
    merged = _deep_merge(base_data, main_data)

    return AppConfig(
        master_table=MasterTableConfig(**_section(merged, "master_table")),
        supply_cells=SupplyCellsConfig(**_section(merged, "supply_cells")),
        source=SourceConfig(**_section(merged, "source")),
        logging=LoggingConfig(**_section(merged, "logging")),
    )
