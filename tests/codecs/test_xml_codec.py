# tests/codecs/test_xml_codec.py
"""Tests for the fallback XML codec."""

from datetime import datetime
from decimal import Decimal

import pytest

from serdeguard.codecs.xml_codec import XmlCodec
from serdeguard.contracts.errors import EncodeError
from tests.fixtures.models import Account, Color, Node, Polyline


class Faulty:
    __slots__ = ()

    def __str__(self) -> str:
        raise ValueError("no text")


@pytest.fixture
def codec() -> XmlCodec:
    return XmlCodec()


class TestScalars:
    def test_none(self, codec: XmlCodec) -> None:
        assert codec.encode(None) == "<null />"

    def test_int(self, codec: XmlCodec) -> None:
        assert codec.encode(1) == '<value class="builtins.int">1</value>'

    def test_bool(self, codec: XmlCodec) -> None:
        assert codec.encode(True) == '<value class="builtins.bool">true</value>'

    def test_float_uses_repr(self, codec: XmlCodec) -> None:
        assert codec.encode(0.1) == '<value class="builtins.float">0.1</value>'

    def test_bytes_base64(self, codec: XmlCodec) -> None:
        assert codec.encode(b"hi") == '<value class="builtins.bytes">aGk=</value>'

    def test_enum_uses_member_name(self, codec: XmlCodec) -> None:
        assert codec.encode(Color.GREEN) == '<enum class="tests.fixtures.models.Color">GREEN</enum>'

    def test_decimal_differs_from_str(self, codec: XmlCodec) -> None:
        assert codec.encode(Decimal("9.99")) != codec.encode("9.99")

    def test_datetime_differs_from_iso_string(self, codec: XmlCodec) -> None:
        when = datetime(2024, 1, 2, 3, 4, 5)

        assert codec.encode(when) != codec.encode(when.isoformat())

    def test_stateless_object(self, codec: XmlCodec) -> None:
        assert codec.encode(object()) == '<object class="builtins.object" />'


class TestContainers:
    def test_tuple_and_list_differ(self, codec: XmlCodec) -> None:
        assert codec.encode((1, 2)) != codec.encode([1, 2])

    def test_sequence_order_kept(self, codec: XmlCodec) -> None:
        assert codec.encode([1, 2]) != codec.encode([2, 1])

    def test_set_is_order_independent(self, codec: XmlCodec) -> None:
        assert codec.encode({3, 1, 2}) == codec.encode({2, 3, 1})

    def test_set_and_frozenset_differ(self, codec: XmlCodec) -> None:
        assert codec.encode({1}) != codec.encode(frozenset({1}))

    def test_map_key_class_recorded(self, codec: XmlCodec) -> None:
        assert codec.encode({1: "a"}) != codec.encode({"1": "a"})

    def test_map_entries(self, codec: XmlCodec) -> None:
        assert codec.encode({"k": 1}) == (
            '<map class="builtins.dict"><entry>'
            '<key><value class="builtins.str">k</value></key>'
            '<value><value class="builtins.int">1</value></value>'
            "</entry></map>"
        )


class TestObjects:
    def test_fields_sorted_by_name(self, codec: XmlCodec) -> None:
        assert codec.encode(Account("ann", 10)) == (
            '<object class="tests.fixtures.models.Account">'
            '<field name="balance"><value class="builtins.int">10</value></field>'
            '<field name="owner"><value class="builtins.str">ann</value></field>'
            "</object>"
        )

    def test_equal_state_same_text(self, codec: XmlCodec) -> None:
        assert codec.encode(Polyline(1, 2)) == codec.encode(Polyline(1, 2))

    def test_cycle_becomes_reference(self, codec: XmlCodec) -> None:
        loop = Node("loop")
        loop.next = loop

        assert '<reference class="tests.fixtures.models.Node" depth="1" />' in codec.encode(loop)

    def test_failing_str_raises_encode_error(self, codec: XmlCodec) -> None:
        with pytest.raises(EncodeError, match="no text") as exc_info:
            codec.encode(Faulty())

        assert exc_info.value.codec == "xml"
