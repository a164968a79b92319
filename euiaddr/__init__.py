"""
euiaddr -- EUI-48 and EUI-64 hardware identifiers
"""

VERSION = "0.1.0"

from euiaddr.eui import EUI, EUI48, EUI64
from euiaddr.exceptions import (
    ErrorKind,
    EUIError,
    InvalidFormat,
    InvalidLength,
    NullInput,
)
