"""
euiaddr/codec.py - Hex group text codec shared by the EUI types

The text form is a number of groups of two hexadecimal digits separated by
either ":" or "-". The separator found after the first group must be used
for every following group.
"""

from enum import IntEnum

from euiaddr.exceptions import InvalidFormat, NullInput


SEPARATORS = (":", "-")

HEX_DIGITS = {c: int(c, 16) for c in "0123456789abcdefABCDEF"}


class ParseState(IntEnum):
    DIGIT_HI = 0
    DIGIT_LO = 1
    SEPARATOR = 2


def string_length(groups: int) -> int:
    return groups * 3 - 1


def parse_hex_groups(text: str, groups: int, expected: str = "EUI") -> int:
    """
    Parse text consisting of exactly ``groups`` hex pairs and return the
    accumulated value, most significant group first.

    Raises NullInput if text is None and InvalidFormat for anything that
    does not match the grammar.
    """
    if text is None:
        raise NullInput(f"{expected} string")
    if not isinstance(text, str):
        raise InvalidFormat(text, expected)

    length = string_length(groups)
    bits = 0
    separator = None
    state = ParseState.DIGIT_HI

    for n, c in enumerate(text):
        if n == length:
            # Trailing characters
            break

        if state == ParseState.SEPARATOR:
            if separator is None:
                if c not in SEPARATORS:
                    break
                separator = c
            elif c != separator:
                break
            state = ParseState.DIGIT_HI
            continue

        nibble = HEX_DIGITS.get(c)
        if nibble is None:
            break
        bits = (bits << 4) | nibble

        if state == ParseState.DIGIT_HI:
            state = ParseState.DIGIT_LO
        else:
            state = ParseState.SEPARATOR
    else:
        if len(text) == length:
            return bits

    raise InvalidFormat(text, expected)


def format_hex_groups(value: int, groups: int) -> str:
    """
    Format the low ``groups`` octets of value as lowercase hex pairs joined
    by ":".
    """
    return ":".join(f"{b:02x}" for b in value.to_bytes(groups, "big"))
