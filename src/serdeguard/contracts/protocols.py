"""Protocols for the collaborators a contract talks to.

The execution engine supplies statements and scopes; contracts consume them.
Codecs are black boxes behind CodecProtocol / RoundTripCodecProtocol so tests
can substitute recording fakes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from serdeguard.contracts.violation import ContractViolation


@runtime_checkable
class StatementProtocol(Protocol):
    """A statement of a generated test case.

    str(statement) must identify the statement in human-readable form.
    """

    def add_comment(self, comment: str) -> None:
        """Attach a comment that is emitted alongside the statement."""
        ...


@runtime_checkable
class ScopeProtocol(Protocol):
    """Live objects reachable after a statement executed.

    Owned by the execution engine. Contracts only read from it.
    """

    def objects(self) -> Iterable[Any]:
        """Yield scope values in definition order. Entries may be None."""
        ...


@runtime_checkable
class CodecProtocol(Protocol):
    """Encodes objects to text."""

    name: str

    def encode(self, obj: Any) -> str:
        """Encode obj.

        Raises:
            EncodeError: If obj cannot be encoded
        """
        ...


@runtime_checkable
class RoundTripCodecProtocol(CodecProtocol, Protocol):
    """Codec that can also rebuild objects from its own output."""

    def decode(self, text: str, cls: type) -> Any:
        """Rebuild an instance of cls from text.

        Raises:
            DecodeError: If text cannot be rebuilt into cls
        """
        ...


@runtime_checkable
class ContractProtocol(Protocol):
    """A check evaluated after every executed statement.

    Lifecycle:
        1. Discovery: serdeguard_get_contracts hook returns contract classes
        2. Instantiation: ContractManager calls from_settings()
        3. Operation: check() after each statement; violations collected
        4. Reporting: annotate_failure() for every violation kept

    Error handling:
        - check() returns violations, it does not raise them
        - annotate_failure() MUST NOT raise for missing optional inputs
    """

    name: str

    def check(
        self,
        statement: StatementProtocol,
        scope: ScopeProtocol,
        exception: BaseException | None,
    ) -> ContractViolation | None:
        """Evaluate the contract on the objects in scope."""
        ...

    def annotate_failure(
        self,
        statement: StatementProtocol,
        variables: Sequence[Any] | None,
        exception: BaseException | None,
    ) -> None:
        """Attach a human-readable explanation of a failure to statement."""
        ...
