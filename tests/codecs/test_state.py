# tests/codecs/test_state.py
"""Tests for reflective instance state access."""

from serdeguard.codecs.state import instance_state
from tests.fixtures.models import Account, Inventory, SlottedPair


class Secret:
    __slots__ = ("__token",)

    def __init__(self, token: str) -> None:
        self.__token = token


class Extended(SlottedPair):
    __slots__ = ("extra",)


class TestInstanceState:
    def test_instance_dict(self) -> None:
        assert instance_state(Account("ann", 1)) == {"owner": "ann", "balance": 1}

    def test_slots(self) -> None:
        assert instance_state(SlottedPair(1, 2)) == {"left": 1, "right": 2}

    def test_unset_slot_omitted(self) -> None:
        pair = SlottedPair.__new__(SlottedPair)
        pair.left = 1

        assert instance_state(pair) == {"left": 1}

    def test_slots_along_mro(self) -> None:
        value = Extended(1, 2)
        value.extra = 3

        assert instance_state(value) == {"left": 1, "right": 2, "extra": 3}

    def test_private_slot_uses_mangled_name(self) -> None:
        assert instance_state(Secret("x")) == {"_Secret__token": "x"}

    def test_pydantic_bookkeeping_excluded(self) -> None:
        assert instance_state(Inventory(sku="A-1", quantity=3)) == {"sku": "A-1", "quantity": 3}

    def test_stateless(self) -> None:
        assert instance_state(object()) == {}
