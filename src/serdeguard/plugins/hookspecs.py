# src/serdeguard/plugins/hookspecs.py
"""pluggy hook specifications for serdeguard contracts.

Contract packages implement these hooks to register their contract classes.
The contract manager calls them during discovery.

Usage (implementing a plugin):
    from serdeguard.plugins.hookspecs import hookimpl

    class MyContracts:
        @hookimpl  # NOT @hookspec - that's for defining specs
        def serdeguard_get_contracts(self):
            return [MyContract]

Note: @hookspec defines the hook interface (done here).
      @hookimpl marks plugin implementations of those hooks.
"""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from serdeguard.plugins.manager import ContractClass

# Project name for pluggy
PROJECT_NAME = "serdeguard"

# Hook specification marker
hookspec = pluggy.HookspecMarker(PROJECT_NAME)

# Hook implementation marker (for plugins to use)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class SerdeGuardContractSpec:
    """Hook specifications for contract plugins."""

    @hookspec
    def serdeguard_get_contracts(self) -> list["ContractClass"]:  # type: ignore[empty-body]
        """Return contract classes.

        Each class must have `name` and `settings_section` attributes
        and a `from_settings(section)` classmethod receiving
        getattr(SerdeGuardSettings, settings_section).

        Returns:
            List of contract classes (not instances)
        """
