"""Intermediate results of a round-trip check.

These types answer: "What did the codecs see for one candidate?"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from serdeguard.contracts.enums import CheckOutcome


@dataclass(frozen=True)
class RoundTripResult:
    """Primary codec round trip of a single object.

    Fields:
        equal: original.__eq__(decoded) held
        primary_text: Encoded form produced by the primary codec
        decoded: Object rebuilt from primary_text
    """

    equal: bool
    primary_text: str
    decoded: Any = field(repr=False)


@dataclass(frozen=True)
class CandidateReport:
    """Outcome of inspecting one candidate, used for logging and tests."""

    outcome: CheckOutcome
    type_name: str
    reason: str | None = None

    @property
    def is_violation(self) -> bool:
        return self.outcome is CheckOutcome.VIOLATION
