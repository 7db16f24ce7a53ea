"""Serialization codecs used by the round-trip contract.

JsonCodec is the primary round-trip codec; XmlCodec is the structurally
independent fallback used to arbitrate equality disagreements.
"""

from serdeguard.codecs.json_codec import JsonCodec
from serdeguard.codecs.state import instance_state
from serdeguard.codecs.xml_codec import XmlCodec

__all__ = ["JsonCodec", "XmlCodec", "instance_state"]
