# src/serdeguard/core/__init__.py
"""Core infrastructure: Canonical, Configuration, Logging."""

from serdeguard.core.canonical import (
    canonical_json,
    stable_hash,
)
from serdeguard.core.config import (
    LoggingSettings,
    RoundTripSettings,
    SerdeGuardSettings,
    load_settings,
)
from serdeguard.core.logging import configure_logging, get_logger

__all__ = [
    "LoggingSettings",
    "RoundTripSettings",
    "SerdeGuardSettings",
    "canonical_json",
    "configure_logging",
    "get_logger",
    "load_settings",
    "stable_hash",
]
