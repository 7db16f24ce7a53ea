"""Contract violation record.

A ContractViolation is created only when a contract has confirmed a defect.
It is never mutated afterwards; the caller owns aggregation and reporting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from serdeguard.contracts.errors import qualified_name

if TYPE_CHECKING:
    from serdeguard.contracts.protocols import ContractProtocol, StatementProtocol


@dataclass(frozen=True, eq=False)
class ContractViolation:
    """A confirmed contract failure after a statement executed.

    Fields:
        contract: The contract instance that detected the failure
        statement: The statement whose execution led to the failure
        exception: Exception raised by the statement, if any
        subject: The offending scope object (not part of identity)
        variables: Variables to mention when annotating the statement
    """

    contract: ContractProtocol
    statement: StatementProtocol
    exception: BaseException | None = None
    subject: Any = field(default=None, repr=False)
    variables: tuple[Any, ...] = ()

    @property
    def contract_name(self) -> str:
        return self.contract.name

    def is_exception_of_type(self, exception_type: type[BaseException]) -> bool:
        """Whether the statement raised an exception of exception_type."""
        return isinstance(self.exception, exception_type)

    @property
    def statement_position(self) -> int | None:
        """Position of the statement in its test case, if it has one."""
        position = getattr(self.statement, "position", None)
        return position if isinstance(position, int) else None

    def same(self, other: ContractViolation) -> bool:
        """Whether other reports the same failure.

        Same contract class, same statement (text, and position when known)
        and same exception type. The offending object is ignored: two
        different objects failing the same contract at the same statement
        are one finding.
        """
        return self.identity() == other.identity()

    def identity(self) -> dict[str, Any]:
        """JSON-safe description of what makes this violation unique."""
        return {
            "contract": qualified_name(type(self.contract)),
            "statement": str(self.statement),
            "position": self.statement_position,
            "exception_type": None if self.exception is None else qualified_name(type(self.exception)),
        }

    def annotate(self) -> None:
        """Ask the owning contract to comment the statement."""
        self.contract.annotate_failure(self.statement, list(self.variables), self.exception)

    def __str__(self) -> str:
        text = f"{self.contract_name} violated at: {self.statement}"
        if self.exception is not None:
            text += f" (raised {type(self.exception).__name__})"
        return text
