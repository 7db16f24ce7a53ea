"""Built-in contracts.

Registered with the contract manager through BuiltinContracts.
"""

from serdeguard.checks.roundtrip import RoundTripSerializationContract, original_equals
from serdeguard.checks.selection import is_candidate, is_generic_type, select_candidates
from serdeguard.plugins.hookspecs import hookimpl


class BuiltinContracts:
    """pluggy plugin exposing the contracts shipped with serdeguard."""

    @hookimpl
    def serdeguard_get_contracts(self) -> list[type[RoundTripSerializationContract]]:
        return [RoundTripSerializationContract]


__all__ = [
    "BuiltinContracts",
    "RoundTripSerializationContract",
    "is_candidate",
    "is_generic_type",
    "original_equals",
    "select_candidates",
]
