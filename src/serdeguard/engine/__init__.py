"""Execution-side collaborators: scope, statements, and the contract checker."""

from serdeguard.engine.checker import ContractChecker, violation_fingerprint
from serdeguard.engine.scope import ExecutionScope
from serdeguard.engine.statement import Statement

__all__ = ["ContractChecker", "ExecutionScope", "Statement", "violation_fingerprint"]
