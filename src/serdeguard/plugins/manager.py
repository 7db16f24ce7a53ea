# src/serdeguard/plugins/manager.py
"""Contract manager for discovery, registration, and instantiation.

Uses pluggy for hook-based contract registration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import pluggy

from serdeguard.plugins.hookspecs import PROJECT_NAME, SerdeGuardContractSpec

if TYPE_CHECKING:
    from serdeguard.contracts.protocols import ContractProtocol
    from serdeguard.core.config import SerdeGuardSettings


class ContractClass(Protocol):
    """What the manager needs from a registered contract class."""

    name: str
    settings_section: str

    def from_settings(self, settings: Any) -> ContractProtocol: ...


class ContractManager:
    """Manages contract discovery, registration, and lookup.

    Usage:
        manager = ContractManager()
        manager.register_builtin_contracts()

        contracts = manager.create_contracts(settings)
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(SerdeGuardContractSpec)

        # Map name to contract class for duplicate detection
        self._contracts: dict[str, ContractClass] = {}

    def register_builtin_contracts(self) -> None:
        """Register the contracts shipped with serdeguard."""
        from serdeguard.checks import BuiltinContracts

        self.register(BuiltinContracts())

    def register(self, plugin: Any) -> None:
        """Register a plugin.

        Args:
            plugin: Plugin instance implementing hook methods

        Raises:
            ValueError: If a contract name is already registered
        """
        self._pm.register(plugin)
        try:
            self._refresh_caches()
        except ValueError:
            self._pm.unregister(plugin)
            raise

    def _refresh_caches(self) -> None:
        new_contracts: dict[str, ContractClass] = {}
        for contracts in self._pm.hook.serdeguard_get_contracts():
            for cls in contracts:
                name = cls.name
                if name in new_contracts:
                    raise ValueError(f"Duplicate contract name: '{name}'. Already registered by {new_contracts[name].__name__}")  # type: ignore[attr-defined]
                new_contracts[name] = cls
        self._contracts = new_contracts

    def get_contracts(self) -> list[ContractClass]:
        """All registered contract classes."""
        return list(self._contracts.values())

    def get_contract_by_name(self, name: str) -> ContractClass:
        """Look up a contract class by name.

        Raises:
            ValueError: If no contract with that name is registered
        """
        if name not in self._contracts:
            available = sorted(self._contracts)
            raise ValueError(f"Unknown contract: '{name}'. Available: {available}")
        return self._contracts[name]

    def create_contracts(self, settings: SerdeGuardSettings) -> list[ContractProtocol]:
        """Instantiate every contract enabled in settings, in configured order."""
        contracts: list[ContractProtocol] = []
        for name in settings.contracts:
            cls = self.get_contract_by_name(name)
            contracts.append(cls.from_settings(getattr(settings, cls.settings_section)))
        return contracts
