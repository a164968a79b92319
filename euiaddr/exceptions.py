"""
euiaddr/exceptions.py - Exceptions for EUI identifiers
"""

from enum import IntEnum


class ErrorKind(IntEnum):
    NULL_INPUT = 1
    INVALID_LENGTH = 2
    INVALID_FORMAT = 3


class EUIError(ValueError):
    kind: ErrorKind


class NullInput(EUIError):
    kind = ErrorKind.NULL_INPUT

    def __init__(self, what: str):
        super().__init__(f"{what} must not be None")
        self.what = what


class InvalidLength(EUIError):
    kind = ErrorKind.INVALID_LENGTH

    def __init__(self, length: int, expected: int):
        super().__init__(f"octets is of illegal length {length}, expected {expected}")
        self.length = length
        self.expected = expected


class InvalidFormat(EUIError):
    kind = ErrorKind.INVALID_FORMAT

    def __init__(self, value, expected: str):
        super().__init__(f"Invalid {expected} string: {value!r}")
        self.value = value
        self.expected = expected
