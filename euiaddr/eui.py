"""
EUI hardware address objects
"""

from dataclasses import dataclass

from euiaddr.codec import format_hex_groups, parse_hex_groups, string_length
from euiaddr.exceptions import InvalidLength, NullInput


class EUI:
    """
    Base for fixed width EUI identifiers.

    Subclasses set OCTETS and implement from_int() and __int__(). Parsing,
    formatting, octet conversion and ordering are all defined here in terms
    of the unsigned integer value.
    """

    __slots__ = ()

    OCTETS = 0
    BITS = 0
    NAME = "EUI"

    @classmethod
    def from_int(cls, value: int) -> "EUI":
        raise NotImplementedError

    def __int__(self) -> int:
        raise NotImplementedError

    @classmethod
    def from_octets(cls, octets) -> "EUI":
        """
        Construct from octets in transmission order. Each element is masked
        to 8 bits, so signed byte values are accepted.
        """
        if octets is None:
            raise NullInput("octets")
        if len(octets) != cls.OCTETS:
            raise InvalidLength(len(octets), cls.OCTETS)
        return cls.from_int(int.from_bytes(bytes(b & 0xff for b in octets), "big"))

    def to_octets(self) -> bytes:
        return int(self).to_bytes(self.OCTETS, "big")

    @classmethod
    def parse(cls, name: str) -> "EUI":
        """
        Parse the standard representation: OCTETS groups of two hex digits
        separated by colons or hyphens, in transmission order.
        """
        return cls.from_int(parse_hex_groups(name, cls.OCTETS, cls.NAME))

    def format(self) -> str:
        return format_hex_groups(int(self), self.OCTETS)

    def compare(self, other: "EUI") -> int:
        if type(other) is not type(self):
            raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")
        a, b = int(self), int(other)
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.format()!r})"

    def __len__(self) -> int:
        return self.OCTETS


@dataclass(frozen=True, slots=True, repr=False)
class EUI48(EUI):
    """
    Represents an EUI-48 (MAC) address as 32 most significant bits and 16
    least significant bits.
    """

    most_significant_bits: int
    least_significant_bits: int

    OCTETS = 6
    BITS = 48
    NAME = "EUI-48"
    STRING_LENGTH = string_length(6)

    def __post_init__(self):
        object.__setattr__(self, "most_significant_bits", self.most_significant_bits & 0xffffffff)
        object.__setattr__(self, "least_significant_bits", self.least_significant_bits & 0xffff)

    @classmethod
    def from_int(cls, value: int) -> "EUI48":
        return cls(value >> 16, value)

    def __int__(self) -> int:
        return (self.most_significant_bits << 16) | self.least_significant_bits

    def compare(self, other: "EUI48") -> int:
        if type(other) is not type(self):
            raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")
        # High field decides unless equal
        if self.most_significant_bits != other.most_significant_bits:
            return -1 if self.most_significant_bits < other.most_significant_bits else 1
        if self.least_significant_bits != other.least_significant_bits:
            return -1 if self.least_significant_bits < other.least_significant_bits else 1
        return 0

    def __hash__(self) -> int:
        return self.most_significant_bits ^ self.least_significant_bits


@dataclass(frozen=True, slots=True, repr=False)
class EUI64(EUI):
    """
    Represents an EUI-64 address.
    """

    bits: int

    OCTETS = 8
    BITS = 64
    NAME = "EUI-64"
    STRING_LENGTH = string_length(8)

    def __post_init__(self):
        object.__setattr__(self, "bits", self.bits & 0xffffffffffffffff)

    @classmethod
    def from_int(cls, value: int) -> "EUI64":
        return cls(value)

    def __int__(self) -> int:
        return self.bits

    def __hash__(self) -> int:
        return (self.bits & 0xffffffff) ^ (self.bits >> 32)
