# src/serdeguard/core/config.py
"""
Configuration schema and loading for serdeguard.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ImportString, field_validator, model_validator

from serdeguard.contracts.enums import SelectionPolicy

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")


class RoundTripSettings(BaseModel):
    """Configuration of the serialization round-trip contract.

    Example YAML:
        roundtrip:
          selection: strict
          target_class: "shop.cart.Cart"
          log_details: false
    """

    model_config = {"frozen": True}

    selection: SelectionPolicy = Field(
        default=SelectionPolicy.PERMISSIVE,
        description="permissive: check every object in scope; strict: only non-generic instances of target_class",
    )
    target_class: ImportString[Any] | None = Field(
        default=None,
        description="Dotted path of the class under test (module.Class or module:Class)",
    )
    log_details: bool = Field(
        default=True,
        description="Include original/decoded objects and JSON text in violation log events",
    )

    @field_validator("target_class")
    @classmethod
    def validate_target_is_class(cls, v: Any) -> Any:
        """The imported target must be a class, not a function or module."""
        if v is not None and not isinstance(v, type):
            raise ValueError(f"target_class must name a class, got {type(v).__name__}")
        return v

    @model_validator(mode="after")
    def validate_strict_has_target(self) -> "RoundTripSettings":
        """Strict selection only inspects target_class instances, so it needs one."""
        if self.selection is SelectionPolicy.STRICT and self.target_class is None:
            raise ValueError("target_class is required when selection is 'strict'")
        return self


class LoggingSettings(BaseModel):
    """Logging output configuration."""

    model_config = {"frozen": True}

    level: str = Field(default="INFO", description="DEBUG, INFO, WARNING or ERROR")
    json_output: bool = Field(default=False, description="Emit JSON lines instead of console output")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level


class SerdeGuardSettings(BaseModel):
    """Top-level serdeguard configuration.

    All settings are validated and frozen after construction.
    """

    model_config = {"frozen": True}

    contracts: list[str] = Field(
        default_factory=lambda: ["roundtrip_serialization"],
        description="Names of the contracts to evaluate after each statement",
    )
    roundtrip: RoundTripSettings = Field(
        default_factory=RoundTripSettings,
        description="Round-trip serialization contract configuration",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    @field_validator("contracts")
    @classmethod
    def validate_contracts(cls, v: list[str]) -> list[str]:
        """At least one contract, no duplicates."""
        if not v:
            raise ValueError("at least one contract must be enabled")
        duplicates = sorted({name for name in v if v.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate contract name(s): {duplicates}")
        return v


def _expand_env_vars(config: dict[str, Any]) -> dict[str, Any]:
    """Recursively expand ${VAR} and ${VAR:-default} patterns in config values.

    Args:
        config: Configuration dict (may contain nested structures)

    Returns:
        New dict with environment variables expanded
    """

    def _expand_string(value: str) -> str:
        def replacer(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default = match.group(2)
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            if default is not None:
                return default
            # No env var and no default - keep original (validation will report it)
            return match.group(0)

        return _ENV_VAR_PATTERN.sub(replacer, value)

    def _expand_value(value: Any) -> Any:
        if isinstance(value, str):
            return _expand_string(value)
        elif isinstance(value, dict):
            return {k: _expand_value(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [_expand_value(item) for item in value]
        else:
            return value

    return {k: _expand_value(v) for k, v in config.items()}


def _lowercase_keys(value: Any) -> Any:
    """Dynaconf returns uppercase keys at every level; Pydantic wants lowercase."""
    if isinstance(value, dict):
        return {str(k).lower(): _lowercase_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_lowercase_keys(item) for item in value]
    return value


def load_settings(config_path: Path) -> SerdeGuardSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (SERDEGUARD_*) - highest priority
    2. Config file
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: SERDEGUARD_ROUNDTRIP__SELECTION for nested keys.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated SerdeGuardSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="SERDEGUARD",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): _lowercase_keys(v) for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    raw_config = _expand_env_vars(raw_config)

    return SerdeGuardSettings(**raw_config)
