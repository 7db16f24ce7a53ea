# src/serdeguard/checks/roundtrip.py
"""Serialization round-trip contract.

Every candidate object in scope is encoded with the primary (JSON) codec and
decoded back into its runtime type. The decoded object must be equal to the
original according to the ORIGINAL's __eq__.

Many classes ship a weak or missing __eq__, so inequality alone is not proof
of a serialization defect. On inequality both objects are encoded with the
fallback (XML) codec; only if those texts differ too is a violation reported.

Outcomes per candidate:
    EQUAL       round trip preserved equality
    SUPPRESSED  __eq__ disagreed, fallback texts agree (weak equality)
    VIOLATION   __eq__ and fallback both see a difference
    INCOMPLETE  a codec or __eq__ raised; candidate skipped, next one checked
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from serdeguard.checks.selection import select_candidates
from serdeguard.codecs.json_codec import JsonCodec
from serdeguard.codecs.xml_codec import XmlCodec
from serdeguard.contracts.enums import CheckOutcome, SelectionPolicy
from serdeguard.contracts.errors import CodecError, DecodeError, EncodeError, EqualityError, qualified_name
from serdeguard.contracts.results import CandidateReport, RoundTripResult
from serdeguard.contracts.violation import ContractViolation
from serdeguard.core.logging import get_logger

if TYPE_CHECKING:
    from serdeguard.contracts.protocols import (
        CodecProtocol,
        RoundTripCodecProtocol,
        ScopeProtocol,
        StatementProtocol,
    )
    from serdeguard.core.config import RoundTripSettings

logger = get_logger(__name__)


def _safe_repr(obj: Any) -> str:
    # Objects rebuilt without __init__ may lack attributes their __repr__ reads
    try:
        return repr(obj)
    except Exception:
        return f"<{qualified_name(type(obj))} (repr failed)>"


def _encode(codec: CodecProtocol, obj: Any) -> str:
    try:
        return codec.encode(obj)
    except CodecError:
        raise
    except Exception as e:
        # Codecs are pluggable; whatever they raise means the check is incomplete
        raise EncodeError(codec.name, qualified_name(type(obj)), str(e) or type(e).__name__) from e


def _decode(codec: RoundTripCodecProtocol, text: str, cls: type) -> Any:
    try:
        return codec.decode(text, cls)
    except CodecError:
        raise
    except Exception as e:
        raise DecodeError(codec.name, qualified_name(cls), str(e) or type(e).__name__) from e


def original_equals(original: Any, other: Any) -> bool:
    """Apply original's own __eq__ to other.

    The == operator would fall back to other.__eq__ when original returns
    NotImplemented, and equality of buggy types is not symmetric. Here
    NotImplemented means "not equal" unless both are the same object.

    Raises:
        EqualityError: If original's __eq__ raises
    """
    try:
        result = type(original).__eq__(original, other)
    except Exception as e:
        raise EqualityError(original, e) from e
    if result is NotImplemented:
        return original is other
    return bool(result)


class RoundTripSerializationContract:
    """Checks that scope objects survive a JSON round trip.

    Codec instances are owned by the contract, created once and reused for
    every statement. Not safe for concurrent check() calls.

    Example:
        contract = RoundTripSerializationContract()
        violation = contract.check(statement, scope, None)
        if violation is not None:
            violation.annotate()
    """

    name = "roundtrip_serialization"
    settings_section = "roundtrip"

    def __init__(
        self,
        *,
        selection: SelectionPolicy = SelectionPolicy.PERMISSIVE,
        target_type: type | None = None,
        log_details: bool = True,
        primary_codec: RoundTripCodecProtocol | None = None,
        fallback_codec: CodecProtocol | None = None,
    ) -> None:
        if selection is SelectionPolicy.STRICT and target_type is None:
            raise ValueError("strict selection requires a target_type")
        self.selection = selection
        self.target_type = target_type
        self.log_details = log_details
        self.primary_codec: RoundTripCodecProtocol = primary_codec if primary_codec is not None else JsonCodec()
        self.fallback_codec: CodecProtocol = fallback_codec if fallback_codec is not None else XmlCodec()

    @classmethod
    def from_settings(cls, settings: RoundTripSettings) -> RoundTripSerializationContract:
        return cls(
            selection=settings.selection,
            target_type=settings.target_class,
            log_details=settings.log_details,
        )

    def check(
        self,
        statement: StatementProtocol,
        scope: ScopeProtocol,
        exception: BaseException | None,
    ) -> ContractViolation | None:
        """Return a violation for the first offending candidate, or None."""
        for candidate in select_candidates(scope.objects(), self.selection, self.target_type):
            report = self.inspect(candidate)
            if report.is_violation:
                return ContractViolation(
                    contract=self,
                    statement=statement,
                    exception=exception,
                    subject=candidate,
                )
        return None

    def inspect(self, obj: Any) -> CandidateReport:
        """Run the round trip and, on inequality, the fallback comparison."""
        type_name = qualified_name(type(obj))
        try:
            result = self.round_trip(obj)
            if result.equal:
                return CandidateReport(CheckOutcome.EQUAL, type_name)
            agreed = self.consensus(obj, result.decoded)
        except (CodecError, EqualityError) as e:
            logger.warning(
                "roundtrip_check_incomplete",
                type=type_name,
                error_type=type(e).__name__,
                error=str(e),
            )
            return CandidateReport(CheckOutcome.INCOMPLETE, type_name, reason=str(e))

        if agreed:
            logger.debug("roundtrip_suppressed", type=type_name)
            return CandidateReport(CheckOutcome.SUPPRESSED, type_name, reason="fallback encodings are identical")

        if self.log_details:
            logger.warning(
                "roundtrip_violation",
                type=type_name,
                original=_safe_repr(obj),
                decoded=_safe_repr(result.decoded),
                json=result.primary_text,
            )
        else:
            logger.warning("roundtrip_violation", type=type_name)
        return CandidateReport(CheckOutcome.VIOLATION, type_name, reason="fallback encodings differ")

    def round_trip(self, obj: Any) -> RoundTripResult:
        """Encode obj with the primary codec, decode into type(obj), compare.

        Raises:
            CodecError: If encoding or decoding fails
            EqualityError: If obj's __eq__ raises
        """
        text = _encode(self.primary_codec, obj)
        decoded = _decode(self.primary_codec, text, type(obj))
        return RoundTripResult(equal=original_equals(obj, decoded), primary_text=text, decoded=decoded)

    def consensus(self, original: Any, decoded: Any) -> bool:
        """Whether the fallback codec sees original and decoded as identical.

        Raises:
            CodecError: If either object cannot be encoded
        """
        return _encode(self.fallback_codec, original) == _encode(self.fallback_codec, decoded)

    def annotate_failure(
        self,
        statement: StatementProtocol,
        variables: Sequence[Any] | None,
        exception: BaseException | None,
    ) -> None:
        """Comment statement with the failure, omitting absent parts."""
        comment = f"{type(self).__name__} failed. Statement: {statement}"
        if variables:
            comment += ", Variables: [" + ", ".join(str(v) for v in variables) + "]"
        if exception is not None:
            comment += f", Exception: {str(exception) or type(exception).__name__}"
        statement.add_comment(comment)
