"""Configuration management for tablecopy.

Handles the TOML config file, environment variables and precedence
resolution.

Precedence order (highest to lowest):
1. CLI flags (--format, --table-name, --force8bit, ...)
2. Environment variables (TABLECOPY_*)
3. Config file
4. Built-in defaults
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from tablecopy.core.exceptions import ConfigError
from tablecopy.core.models import ClipboardFormat

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "tablecopy" / "config.toml"

_ENV_VARS: dict[str, str] = {
    "TABLECOPY_FORMAT": "default_format",
    "TABLECOPY_TABLE_NAME": "table_name",
    "TABLECOPY_FORCE8BIT": "force8bit",
    "TABLECOPY_EMPTY_STRING_IS_NULL": "empty_string_is_null",
    "TABLECOPY_SENTRY_DSN": "sentry_dsn",
}

_OPTION_FIELDS = ("force8bit", "empty_string_is_null", "no_cursor", "vertical_cursor")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ExportOptions(BaseModel):
    """Pager options that change how rows are read and values quoted."""

    force8bit: bool = False
    empty_string_is_null: bool = False
    no_cursor: bool = False
    vertical_cursor: bool = False


class AppConfig(BaseModel):
    default_format: ClipboardFormat = ClipboardFormat.CSV
    table_name: str | None = None
    sentry_dsn: str | None = None
    options: ExportOptions = ExportOptions()

    @field_validator("table_name")
    @classmethod
    def validate_table_name(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            msg = "table_name must not be blank"
            raise ValueError(msg)
        return v


class ResolvedConfig(BaseModel):
    default_format: ClipboardFormat = ClipboardFormat.CSV
    table_name: str | None = None
    sentry_dsn: str | None = None
    options: ExportOptions = ExportOptions()
    sources: dict[str, str] = {}


def parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    msg = f"Invalid {name} value: '{value}'. Use true/false, yes/no, on/off or 1/0"
    raise ConfigError(msg)


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load configuration from TOML file.

    Returns default AppConfig if file doesn't exist.
    Raises ConfigError on malformed TOML or invalid config.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return AppConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Malformed TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid configuration in {config_path}: {e}"
        raise ConfigError(msg) from e


def resolve_config(config: AppConfig, **cli_overrides: Any) -> ResolvedConfig:
    """Resolve configuration using precedence chain.

    CLI > env > config file > built-in defaults. ``None`` CLI values mean
    the flag was not given.
    """
    sources: dict[str, str] = {}
    resolved: dict[str, Any] = {}
    defaults = AppConfig()

    # Layer 1: Built-in defaults, Layer 2: config file
    flat_config: dict[str, Any] = {
        "default_format": config.default_format,
        "table_name": config.table_name,
        "sentry_dsn": config.sentry_dsn,
        **config.options.model_dump(),
    }
    flat_defaults: dict[str, Any] = {
        "default_format": defaults.default_format,
        "table_name": defaults.table_name,
        "sentry_dsn": defaults.sentry_dsn,
        **defaults.options.model_dump(),
    }
    for key, value in flat_config.items():
        resolved[key] = value
        sources[key] = "default" if value == flat_defaults[key] else "config"

    # Layer 3: Environment variables
    for env_var, field_name in _ENV_VARS.items():
        value = os.environ.get(env_var)
        if value is None:
            continue
        if field_name == "default_format":
            try:
                resolved[field_name] = ClipboardFormat(value)
            except ValueError:
                available = ", ".join(f.value for f in ClipboardFormat)
                msg = f"Invalid {env_var} value: '{value}'. Must be one of: {available}"
                raise ConfigError(msg) from None
        elif field_name in _OPTION_FIELDS:
            resolved[field_name] = parse_bool(env_var, value)
        else:
            resolved[field_name] = value or None
        sources[field_name] = f"env: {env_var}"

    # Layer 4: CLI flags (highest priority)
    cli_to_field = {
        "format": "default_format",
        "table_name": "table_name",
        "force8bit": "force8bit",
        "empty_string_is_null": "empty_string_is_null",
        "no_cursor": "no_cursor",
        "vertical_cursor": "vertical_cursor",
    }
    for cli_name, field_name in cli_to_field.items():
        value = cli_overrides.get(cli_name)
        if value is not None:
            resolved[field_name] = value
            flag = cli_name.replace("_", "-")
            sources[field_name] = f"cli: --{flag}"

    options = ExportOptions(**{key: resolved.pop(key) for key in _OPTION_FIELDS})
    return ResolvedConfig(**resolved, options=options, sources=sources)
