# src/serdeguard/checks/selection.py
"""Candidate selection for the round-trip contract.

Runs after every statement: a lazy filter over the scope values.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from serdeguard.contracts.enums import SelectionPolicy

_CONTAINER_MODULES = ("builtins", "collections")


def is_generic_type(cls: type) -> bool:
    """Whether instances of cls carry erased type parameters.

    True for classes with unbound type variables (class Box(Generic[T]),
    class Box[T]) and for stdlib containers parameterized only at annotation
    time (list, dict, deque, Counter, OrderedDict, ...). A subclass that binds
    every parameter (class IntBox(Box[int])) is not generic.
    """
    if getattr(cls, "__parameters__", ()):
        return True
    # Generic subclasses that bind every parameter inherit __class_getitem__
    # from typing.Generic too, so only stdlib containers qualify by it
    return cls.__module__ in _CONTAINER_MODULES and hasattr(cls, "__class_getitem__")


def is_candidate(obj: Any, policy: SelectionPolicy, target_type: type | None) -> bool:
    """Whether obj should be round-tripped under policy."""
    if obj is None:
        return False
    if policy is SelectionPolicy.PERMISSIVE:
        return True
    cls = type(obj)
    if is_generic_type(cls):
        return False
    if cls is not target_type:
        return False
    # A bare object() has no state to round-trip
    return cls is not object


def select_candidates(
    objects: Iterable[Any],
    policy: SelectionPolicy,
    target_type: type | None = None,
) -> Iterator[Any]:
    """Lazily yield the scope objects to check, in scope order.

    Args:
        objects: Scope values; None entries are skipped
        policy: PERMISSIVE checks every object, STRICT only non-generic
            instances of exactly target_type
        target_type: Class under test (required by STRICT)

    Raises:
        ValueError: If policy is STRICT and target_type is None
    """
    if policy is SelectionPolicy.STRICT and target_type is None:
        raise ValueError("strict candidate selection requires a target type")
    return (obj for obj in objects if is_candidate(obj, policy, target_type))
