# src/serdeguard/codecs/json_codec.py
"""
JSON codec: the primary round-trip codec.

Encoding goes through pydantic_core.to_json. Types pydantic understands
(dataclasses, models, enums, datetimes, containers) are encoded natively;
any other object is encoded as its instance state via the fallback hook.

Decoding mirrors that split:
1. Pydantic models: model_validate_json
2. Types pydantic can build a schema for: cached TypeAdapter.validate_json
3. Everything else: allocate with cls.__new__ (no __init__) and restore each
   JSON member, coercing through the class's type hints. Members without a
   usable hint keep their raw JSON value (dict, list, str, ...).

Like any field-reflective JSON mapper this is lossy for untyped state: a
tuple attribute comes back as a list, a datetime attribute as a string.
Finding those losses is the point of the round-trip contract.

The adapter cache is not guarded. Do not share one JsonCodec across threads.
"""

from __future__ import annotations

import types
import typing
from collections import deque
from enum import Enum
from typing import Any

from pydantic import BaseModel, PydanticUndefinedAnnotation, PydanticUserError, TypeAdapter
from pydantic_core import from_json, to_json

from serdeguard.codecs.state import instance_state
from serdeguard.contracts.errors import CodecError, DecodeError, EncodeError, qualified_name

_ATOMIC = (str, bytes, bytearray, int, float, complex, bool, type(None), Enum)
_SEQUENCES = (list, tuple, set, frozenset, deque)
_NO_ADAPTER = object()


def _type_hints(cls: type) -> dict[str, Any]:
    """Resolved annotations of cls, or {} when they cannot be resolved.

    Unresolvable forward references leave every member untyped, which is
    what a reflective mapper without declared types does anyway.
    """
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError, AttributeError):
        return {}


class JsonCodec:
    """Reflective JSON encoder/decoder built on pydantic."""

    name = "json"

    def __init__(self) -> None:
        self._adapters: dict[Any, Any] = {}

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encode(self, obj: Any) -> str:
        """Encode obj as JSON text.

        Raises:
            EncodeError: On cyclic object graphs or values the encoder rejects
        """
        type_name = qualified_name(type(obj))
        try:
            self._check_acyclic(obj)
        except RecursionError as e:
            raise EncodeError(self.name, type_name, "object graph too deep") from e
        try:
            return to_json(obj, fallback=instance_state).decode("utf-8")
        except Exception as e:
            # Black-box boundary: model serializers and computed fields run user code
            raise EncodeError(self.name, type_name, str(e)) from e

    def _check_acyclic(self, obj: Any) -> None:
        """Raise EncodeError if obj reaches itself.

        to_json would otherwise recurse through the fallback hook until the
        interpreter gives up.
        """
        on_path: set[int] = set()
        finished: set[int] = set()

        def visit(value: Any) -> None:
            if isinstance(value, _ATOMIC):
                return
            ident = id(value)
            if ident in finished:
                return
            if ident in on_path:
                raise EncodeError(self.name, qualified_name(type(obj)), f"cyclic reference through {qualified_name(type(value))}")
            on_path.add(ident)
            if isinstance(value, dict):
                for key, item in value.items():
                    visit(key)
                    visit(item)
            elif isinstance(value, _SEQUENCES):
                for item in value:
                    visit(item)
            else:
                for item in instance_state(value).values():
                    visit(item)
            on_path.discard(ident)
            finished.add(ident)

        visit(obj)

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def decode(self, text: str, cls: type) -> Any:
        """Rebuild an instance of exactly cls from JSON text.

        Raises:
            DecodeError: If text is not valid for cls, or the result is not a cls
        """
        try:
            result = self._decode(text, cls)
        except CodecError:
            raise
        except Exception as e:
            # Validation errors, __new__ signatures, read-only slots, ...
            raise DecodeError(self.name, qualified_name(cls), str(e)) from e
        if type(result) is not cls:
            raise DecodeError(
                self.name,
                qualified_name(cls),
                f"decoded into {qualified_name(type(result))}",
            )
        return result

    def _decode(self, text: str, cls: type) -> Any:
        if issubclass(cls, BaseModel):
            return cls.model_validate_json(text)
        adapter = self._adapter_for(cls)
        if adapter is not None:
            return adapter.validate_json(text)
        return self._rebuild(cls, from_json(text))

    def _adapter_for(self, tp: Any) -> TypeAdapter[Any] | None:
        """Return a cached TypeAdapter for tp, or None if pydantic cannot handle it."""
        cached = self._adapters.get(tp, _NO_ADAPTER)
        if cached is not _NO_ADAPTER:
            return typing.cast("TypeAdapter[Any] | None", cached)
        try:
            adapter: TypeAdapter[Any] | None = TypeAdapter(tp)
        except (PydanticUserError, PydanticUndefinedAnnotation):
            adapter = None
        self._adapters[tp] = adapter
        return adapter

    def _rebuild(self, cls: type, data: Any) -> Any:
        """Allocate cls without __init__ and restore its members from data."""
        if not isinstance(data, dict):
            raise DecodeError(self.name, qualified_name(cls), f"expected a JSON object, got {type(data).__name__}")
        instance = cls.__new__(cls)
        hints = _type_hints(cls)
        for name, value in data.items():
            hint = hints.get(name)
            if hint is not None:
                value = self._coerce(hint, value)
            object.__setattr__(instance, name, value)
        return instance

    def _coerce(self, hint: Any, value: Any) -> Any:
        """Convert a raw JSON value to the declared member type where possible."""
        if value is None:
            return None
        adapter = self._adapter_for(hint)
        if adapter is not None:
            return adapter.validate_python(value)

        origin = typing.get_origin(hint)
        args = typing.get_args(hint)
        if origin in (typing.Union, types.UnionType):
            members = [arg for arg in args if arg is not type(None)]
            if len(members) == 1:
                return self._coerce(members[0], value)
            return value
        if origin in (list, set, frozenset) and len(args) == 1 and isinstance(value, list):
            return origin(self._coerce(args[0], item) for item in value)
        if origin is tuple and isinstance(value, list):
            if len(args) == 2 and args[1] is Ellipsis:
                return tuple(self._coerce(args[0], item) for item in value)
            return tuple(self._coerce(arg, item) for arg, item in zip(args, value, strict=False))
        if origin is dict and len(args) == 2 and isinstance(value, dict):
            return {self._coerce(args[0], k): self._coerce(args[1], v) for k, v in value.items()}
        if origin is None and isinstance(hint, type) and isinstance(value, dict):
            return self._rebuild(hint, value)
        return value
