"""
euiaddr/cli/types.py - Types used for argument parsing and validation
"""

from euiaddr.eui import EUI, EUI48, EUI64
from euiaddr.exceptions import EUIError


def eui48(value: str) -> EUI48:
    try:
        return EUI48.parse(value)
    except EUIError:
        raise ValueError("invalid EUI-48 hardware address")


def eui64(value: str) -> EUI64:
    try:
        return EUI64.parse(value)
    except EUIError:
        raise ValueError("invalid EUI-64 hardware address")


def eui(value: str) -> EUI:
    """
    Accept either width, chosen by the length of the value.
    """
    if len(value) == EUI64.STRING_LENGTH:
        return eui64(value)
    try:
        return EUI48.parse(value)
    except EUIError:
        raise ValueError("invalid EUI hardware address")


def octets(value: str) -> EUI:
    """
    Accept plain hex octets, 12 digits for EUI-48 or 16 for EUI-64.
    """
    try:
        data = bytes.fromhex(value)
    except ValueError:
        raise ValueError("invalid hex octets")
    for cls in (EUI48, EUI64):
        if len(data) == cls.OCTETS:
            return cls.from_octets(data)
    raise ValueError(f"expected {EUI48.OCTETS} or {EUI64.OCTETS} octets, got {len(data)}")
