# tests/fixtures/models.py
"""Sample classes under test for round-trip contract tests.

Each class documents how it behaves under a JSON round trip:
- survives: decoded object is equal to the original
- weak eq: serialization is fine but __eq__ cannot confirm it
- lossy: JSON loses type information the object relies on
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


@dataclass
class Point:
    """Survives: dataclass handled natively by pydantic."""

    x: int
    y: int


@dataclass(frozen=True)
class Label:
    """Survives: frozen dataclass."""

    text: str


class Inventory(BaseModel):
    """Survives: pydantic model."""

    sku: str
    quantity: int


class Color(Enum):
    RED = "red"
    GREEN = "green"


class Account:
    """Survives: plain class rebuilt reflectively, value-based __eq__."""

    def __init__(self, owner: str, balance: int) -> None:
        self.owner = owner
        self.balance = balance

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return (self.owner, self.balance) == (other.owner, other.balance)

    def __repr__(self) -> str:
        return f"Account({self.owner!r}, {self.balance!r})"


@dataclass
class Order:
    """Survives: dataclass with a plain-class member, rebuilt through type hints."""

    customer: Account
    total: int


class NoEquality:
    """Weak eq: identity equality only."""

    def __init__(self, label: str) -> None:
        self.label = label


class BrokenEquality:
    """Weak eq: never equal to anything, itself included."""

    def __init__(self, value: Any) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return False

    __hash__ = object.__hash__


class BrokenEqualitySubclass(BrokenEquality):
    """Same broken equality, different runtime type."""


class Box(Generic[T]):
    """Weak eq and generic: carries an erased type parameter."""

    def __init__(self, item: T) -> None:
        self.item = item

    def __eq__(self, other: object) -> bool:
        return False

    __hash__ = object.__hash__


class IntBox(Box[int]):
    """Binds every type parameter of Box, so not generic."""


class Polyline:
    """Lossy: an unannotated tuple attribute comes back as a list."""

    def __init__(self, *points: int) -> None:
        self.points = tuple(points)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Polyline) and self.points == other.points

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"Polyline{self.points!r}"


class UntypedPrice:
    """Lossy: an unannotated Decimal attribute comes back as a str."""

    def __init__(self, amount: Decimal) -> None:
        self.amount = amount

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UntypedPrice) and self.amount == other.amount

    __hash__ = object.__hash__


class TypedPrice:
    """Survives: the class annotation lets the decoder restore the Decimal."""

    amount: Decimal

    def __init__(self, amount: Decimal) -> None:
        self.amount = amount

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TypedPrice) and self.amount == other.amount

    __hash__ = object.__hash__


class SlottedPair:
    """Survives: state stored in __slots__."""

    __slots__ = ("left", "right")

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SlottedPair) and (self.left, self.right) == (other.left, other.right)

    __hash__ = object.__hash__


class Node:
    """Linked node; can be made cyclic."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.next: Node | None = None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Node) and self.name == other.name and self.next == other.next

    __hash__ = object.__hash__


class ExplodingEquality:
    """__eq__ raises instead of answering."""

    def __init__(self) -> None:
        self.value = 1

    def __eq__(self, other: object) -> bool:
        raise RuntimeError("equality is not supported")

    __hash__ = object.__hash__
