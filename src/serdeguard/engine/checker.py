# src/serdeguard/engine/checker.py
"""Runs contracts after each executed statement and collects violations.

Violations are de-duplicated by fingerprint: the same contract failing at
the same statement with the same exception type is reported once, however
many objects or executions exhibit it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from serdeguard.core.canonical import stable_hash
from serdeguard.core.logging import configure_logging, get_logger

if TYPE_CHECKING:
    from serdeguard.contracts.protocols import ContractProtocol, ScopeProtocol, StatementProtocol
    from serdeguard.contracts.violation import ContractViolation
    from serdeguard.core.config import SerdeGuardSettings
    from serdeguard.plugins.manager import ContractManager

logger = get_logger(__name__)


def violation_fingerprint(violation: ContractViolation) -> str:
    """Stable identifier for de-duplicating violations."""
    return stable_hash(violation.identity())


class ContractChecker:
    """Evaluates a fixed set of contracts after every statement.

    A contract that raises is logged and skipped for that statement; a
    broken contract must not abort the test case being executed.
    """

    def __init__(self, contracts: Sequence[ContractProtocol]) -> None:
        self._contracts = list(contracts)
        self._violations: list[ContractViolation] = []
        self._seen: set[str] = set()

    @classmethod
    def from_settings(cls, settings: SerdeGuardSettings, manager: ContractManager | None = None) -> ContractChecker:
        """Build a checker for the contracts enabled in settings.

        Also applies settings.logging, so this is the one call an embedding
        test generator needs at startup.
        """
        configure_logging(json_output=settings.logging.json_output, level=settings.logging.level)
        if manager is None:
            from serdeguard.plugins.manager import ContractManager

            manager = ContractManager()
            manager.register_builtin_contracts()
        return cls(manager.create_contracts(settings))

    @property
    def contracts(self) -> list[ContractProtocol]:
        return list(self._contracts)

    @property
    def violations(self) -> list[ContractViolation]:
        """Unique violations collected so far, in detection order."""
        return list(self._violations)

    def check(
        self,
        statement: StatementProtocol,
        scope: ScopeProtocol,
        exception: BaseException | None = None,
    ) -> list[ContractViolation]:
        """Evaluate every contract; return the violations not seen before."""
        found: list[ContractViolation] = []
        for contract in self._contracts:
            try:
                violation = contract.check(statement, scope, exception)
            except Exception:
                logger.exception("contract_check_failed", contract=contract.name, statement=str(statement))
                continue
            if violation is None:
                continue
            fingerprint = violation_fingerprint(violation)
            if fingerprint in self._seen:
                continue
            self._seen.add(fingerprint)
            self._violations.append(violation)
            found.append(violation)
            logger.info(
                "contract_violation_recorded",
                contract=violation.contract_name,
                statement=str(statement),
                fingerprint=fingerprint,
            )
        return found

    def annotate_all(self) -> None:
        """Comment every collected violation's statement."""
        for violation in self._violations:
            violation.annotate()

    def reset(self) -> None:
        """Forget collected violations, e.g. before the next test case."""
        self._violations.clear()
        self._seen.clear()
