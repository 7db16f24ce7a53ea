# src/serdeguard/codecs/state.py
"""Reflective access to an object's instance state."""

from typing import Any


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _slot_names(klass: type) -> tuple[str, ...]:
    slots = klass.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    names = []
    for name in slots:
        if _is_dunder(name):
            continue
        if name.startswith("__"):
            # Private slots are stored under their mangled name
            name = f"_{klass.__name__.lstrip('_')}{name}"
        names.append(name)
    return tuple(names)


def instance_state(obj: Any) -> dict[str, Any]:
    """Return attribute name -> value for the state stored on obj.

    Covers __slots__ along the MRO and the instance __dict__. Dunder names
    (__weakref__, pydantic's __pydantic_fields_set__, ...) are bookkeeping,
    not state. Unset slots are omitted. No user __getattr__ runs.
    """
    state: dict[str, Any] = {}
    for klass in reversed(type(obj).__mro__):
        for name in _slot_names(klass):
            try:
                state[name] = object.__getattribute__(obj, name)
            except AttributeError:
                continue
    try:
        obj_dict = object.__getattribute__(obj, "__dict__")
    except AttributeError:
        return state
    for name, value in obj_dict.items():
        if not _is_dunder(name):
            state[name] = value
    return state
