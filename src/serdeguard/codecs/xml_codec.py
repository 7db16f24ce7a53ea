# src/serdeguard/codecs/xml_codec.py
"""
XML codec: the fallback encoder used to arbitrate equality disagreements.

Structurally independent of the JSON codec: every element records the
runtime class of the value it encodes, so values that JSON cannot tell
apart (tuple vs list, datetime vs its ISO string, Decimal vs str) produce
different XML. Only encoding is needed; the contract compares texts.

Element vocabulary:
    <null/>                              None
    <value class="...">text</value>      scalars (int, float, str, Decimal, dates, ...)
    <enum class="...">NAME</enum>        enum members
    <sequence class="...">...</sequence> list, tuple, deque (in order)
    <set class="...">...</set>           set, frozenset (sorted by encoded form)
    <map class="..."><entry><key/><value/></entry></map>
    <object class="..."><field name="...">...</field></object>
    <reference class="..." depth="n"/>   back-reference to the n-th enclosing element
"""

# Since we are not reading XML, but creating it, the package security message is irrelevant
import xml.etree.ElementTree as ET  # nosec
from base64 import b64encode
from collections import deque
from collections.abc import Mapping
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import PurePath
from typing import Any
from uuid import UUID

from serdeguard.codecs.state import instance_state
from serdeguard.contracts.errors import EncodeError, qualified_name


class Tags:
    NULL = "null"
    VALUE = "value"
    ENUM = "enum"
    SEQUENCE = "sequence"
    SET = "set"
    MAP = "map"
    ENTRY = "entry"
    KEY = "key"
    OBJECT = "object"
    FIELD = "field"
    REFERENCE = "reference"


# Encoded by their string form; some (UUID, PurePath) cache derived data in slots
_VALUE_TYPES = (str, int, complex, Decimal, Fraction, date, time, timedelta, UUID, PurePath)
_CONTAINERS = (Mapping, list, tuple, set, frozenset, deque)


def _has_instance_dict(value: Any) -> bool:
    try:
        object.__getattribute__(value, "__dict__")
    except AttributeError:
        return False
    return True


def _scalar_text(value: Any) -> str | None:
    """Text for values encoded as a single <value> element, None otherwise."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, bytes | bytearray):
        return b64encode(bytes(value)).decode("ascii")
    if isinstance(value, _VALUE_TYPES):
        return str(value)
    if isinstance(value, _CONTAINERS) or _has_instance_dict(value) or instance_state(value):
        return None
    cls = type(value)
    if cls.__str__ is object.__str__ and cls.__repr__ is object.__repr__:
        # Default str() embeds the memory address
        return None
    return str(value)


class XmlCodec:
    """Reflective XML encoder."""

    name = "xml"

    def encode(self, obj: Any) -> str:
        """Encode obj as XML text.

        Raises:
            EncodeError: If obj cannot be encoded
        """
        try:
            return ET.tostring(self._element(obj, []), encoding="unicode")
        except RecursionError as e:
            raise EncodeError(self.name, qualified_name(type(obj)), "object graph too deep") from e
        except Exception as e:
            # Black-box boundary: __str__ of scalar-like values is user code
            raise EncodeError(self.name, qualified_name(type(obj)), str(e)) from e

    def _element(self, value: Any, stack: list[int]) -> ET.Element:
        if value is None:
            return ET.Element(Tags.NULL)

        class_name = qualified_name(type(value))
        if isinstance(value, Enum):
            element = ET.Element(Tags.ENUM, {"class": class_name})
            element.text = value.name
            return element

        text = _scalar_text(value)
        if text is not None:
            element = ET.Element(Tags.VALUE, {"class": class_name})
            element.text = text
            return element

        ident = id(value)
        if ident in stack:
            depth = len(stack) - stack.index(ident)
            return ET.Element(Tags.REFERENCE, {"class": class_name, "depth": str(depth)})

        stack.append(ident)
        try:
            if isinstance(value, Mapping):
                element = ET.Element(Tags.MAP, {"class": class_name})
                for key, item in value.items():
                    entry = ET.SubElement(element, Tags.ENTRY)
                    ET.SubElement(entry, Tags.KEY).append(self._element(key, stack))
                    ET.SubElement(entry, Tags.VALUE).append(self._element(item, stack))
            elif isinstance(value, set | frozenset):
                element = ET.Element(Tags.SET, {"class": class_name})
                children = [self._element(item, stack) for item in value]
                children.sort(key=lambda child: ET.tostring(child, encoding="unicode"))
                element.extend(children)
            elif isinstance(value, list | tuple | deque):
                element = ET.Element(Tags.SEQUENCE, {"class": class_name})
                element.extend(self._element(item, stack) for item in value)
            else:
                element = ET.Element(Tags.OBJECT, {"class": class_name})
                state = instance_state(value)
                for name in sorted(state):
                    ET.SubElement(element, Tags.FIELD, name=name).append(self._element(state[name], stack))
        finally:
            stack.pop()
        return element
