# src/serdeguard/engine/scope.py
"""Execution scope: the live values of a running test case."""

from collections.abc import Iterator
from typing import Any


class ExecutionScope:
    """Ordered variable name -> value mapping.

    Values keep the order in which their variables were first defined;
    rebinding a variable keeps its position. None values are allowed.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def set(self, name: str, value: Any) -> None:
        self._values[name] = value

    def get(self, name: str) -> Any:
        """Value bound to name.

        Raises:
            KeyError: If name was never defined
        """
        return self._values[name]

    def objects(self) -> list[Any]:
        return list(self._values.values())

    def __iter__(self) -> Iterator[Any]:
        return iter(self.objects())

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values
