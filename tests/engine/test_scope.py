# tests/engine/test_scope.py
"""Tests for execution scope and statements."""

import pytest

from serdeguard.engine.scope import ExecutionScope
from serdeguard.engine.statement import Statement


class TestExecutionScope:
    def test_definition_order(self, scope: ExecutionScope) -> None:
        scope.set("b", 2)
        scope.set("a", 1)

        assert scope.objects() == [2, 1]
        assert list(scope) == [2, 1]

    def test_rebinding_keeps_position(self, scope: ExecutionScope) -> None:
        scope.set("a", 1)
        scope.set("b", 2)
        scope.set("a", 3)

        assert scope.objects() == [3, 2]
        assert scope.get("a") == 3

    def test_none_values_allowed(self, scope: ExecutionScope) -> None:
        scope.set("a", None)

        assert scope.objects() == [None]
        assert "a" in scope
        assert len(scope) == 1

    def test_unknown_name(self, scope: ExecutionScope) -> None:
        with pytest.raises(KeyError):
            scope.get("missing")

        assert "missing" not in scope


class TestStatement:
    def test_str_is_code(self) -> None:
        assert str(Statement(position=0, code="x = X()")) == "x = X()"

    def test_comments_accumulate(self) -> None:
        statement = Statement(position=0, code="x = X()")

        statement.add_comment("first")
        statement.add_comment("second")

        assert statement.comments == ["first", "second"]

    def test_comments_not_shared(self) -> None:
        first = Statement(0, "a")
        second = Statement(1, "b")

        first.add_comment("only first")

        assert second.comments == []
