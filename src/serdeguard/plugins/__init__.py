"""Contract plugin system: hook specifications and the contract manager."""

from serdeguard.plugins.hookspecs import PROJECT_NAME, hookimpl, hookspec
from serdeguard.plugins.manager import ContractManager

__all__ = ["PROJECT_NAME", "ContractManager", "hookimpl", "hookspec"]
