"""
euiaddr/adapters.py - Marshalling adapters for text and binary storage

Absent values (None) pass straight through both adapters without touching
the codec.
"""

import logging
from typing import Type

from google.protobuf import wrappers_pb2

from euiaddr.eui import EUI
from euiaddr.exceptions import EUIError


logger = logging.getLogger("adapters")


class TextAdapter:
    """
    Maps an EUI to and from a text node using the standard string
    representation.
    """

    def __init__(self, eui_type: Type[EUI]):
        self.eui_type = eui_type

    def marshal(self, value: EUI | None) -> str | None:
        return None if value is None else value.format()

    def unmarshal(self, text: str | None) -> EUI | None:
        if text is None:
            return None
        try:
            return self.eui_type.parse(text)
        except EUIError as e:
            logger.debug("Could not unmarshal %s: %s", self.eui_type.NAME, e)
            raise

    def to_message(self, value: EUI | None) -> wrappers_pb2.StringValue | None:
        text = self.marshal(value)
        if text is None:
            return None
        return wrappers_pb2.StringValue(value=text)

    def from_message(self, message: wrappers_pb2.StringValue | None) -> EUI | None:
        if message is None:
            return None
        return self.unmarshal(message.value)


class BinaryAdapter:
    """
    Maps an EUI to and from a fixed width binary column holding the octets
    in transmission order.
    """

    is_mutable = False

    def __init__(self, eui_type: Type[EUI]):
        self.eui_type = eui_type

    @property
    def sql_type(self) -> str:
        return f"BINARY({self.eui_type.OCTETS})"

    def marshal(self, value: EUI | None) -> bytes | None:
        return None if value is None else value.to_octets()

    def unmarshal(self, octets: bytes | None) -> EUI | None:
        if octets is None:
            return None
        try:
            return self.eui_type.from_octets(octets)
        except EUIError as e:
            logger.debug("Could not unmarshal %s: %s", self.eui_type.NAME, e)
            raise

    def equals(self, x: EUI | None, y: EUI | None) -> bool:
        if x is None:
            return y is None
        return x == y

    def hash(self, value: EUI | None) -> int:
        return 0 if value is None else hash(value)

    def deep_copy(self, value: EUI | None) -> EUI | None:
        # Immutable, the same instance can be shared
        return value

    def to_message(self, value: EUI | None) -> wrappers_pb2.BytesValue | None:
        octets = self.marshal(value)
        if octets is None:
            return None
        return wrappers_pb2.BytesValue(value=octets)

    def from_message(self, message: wrappers_pb2.BytesValue | None) -> EUI | None:
        if message is None:
            return None
        return self.unmarshal(message.value)
