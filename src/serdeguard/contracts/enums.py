"""Modes and outcomes used across subsystem boundaries."""

from enum import StrEnum


class SelectionPolicy(StrEnum):
    """Which scope objects a round-trip contract inspects.

    Configured in settings (roundtrip.selection).
    """

    PERMISSIVE = "permissive"
    STRICT = "strict"


class CheckOutcome(StrEnum):
    """Result of inspecting a single candidate object.

    Only VIOLATION is reported upward; the others are logged.
    """

    EQUAL = "equal"
    SUPPRESSED = "suppressed"
    VIOLATION = "violation"
    INCOMPLETE = "incomplete"
