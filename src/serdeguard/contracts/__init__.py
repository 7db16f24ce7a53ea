"""Shared contracts for cross-boundary data types.

Dataclasses, enums and protocols that cross subsystem boundaries are defined
here. This package is a LEAF MODULE with no outbound dependencies to
core/codecs/checks/engine.

Import patterns:
    from serdeguard.contracts import ContractViolation, SelectionPolicy

    # Settings classes live in core
    from serdeguard.core.config import RoundTripSettings
"""

from serdeguard.contracts.enums import CheckOutcome, SelectionPolicy
from serdeguard.contracts.errors import (
    CodecError,
    DecodeError,
    EncodeError,
    EqualityError,
    qualified_name,
)
from serdeguard.contracts.protocols import (
    CodecProtocol,
    ContractProtocol,
    RoundTripCodecProtocol,
    ScopeProtocol,
    StatementProtocol,
)
from serdeguard.contracts.results import CandidateReport, RoundTripResult
from serdeguard.contracts.violation import ContractViolation

__all__ = [
    "CandidateReport",
    "CheckOutcome",
    "CodecError",
    "CodecProtocol",
    "ContractProtocol",
    "ContractViolation",
    "DecodeError",
    "EncodeError",
    "EqualityError",
    "RoundTripCodecProtocol",
    "RoundTripResult",
    "ScopeProtocol",
    "SelectionPolicy",
    "StatementProtocol",
    "qualified_name",
]
