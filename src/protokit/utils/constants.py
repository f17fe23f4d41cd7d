"""Shared character tables and platform labels."""

from __future__ import annotations

import string

__all__ = [
    "DIGITS",
    "LOWERCASE",
    "UPPERCASE",
    "LETTERS",
    "ALPHANUMERIC",
    "HEX_DIGITS",
    "NUMBER_DIGITS",
    "PLATFORM_LABELS",
]

DIGITS: str = string.digits
LOWERCASE: str = string.ascii_lowercase
UPPERCASE: str = string.ascii_uppercase
LETTERS: str = string.ascii_letters
ALPHANUMERIC: str = string.ascii_letters + string.digits
HEX_DIGITS: str = "0123456789abcdef"

# Digit pool for fixed-length numbers; the leading digit is redrawn on "0".
NUMBER_DIGITS: str = "1234567890"

PLATFORM_LABELS: frozenset[str] = frozenset(
    {"windows", "linux", "android", "bsd", "hp-ux", "aix", "ios", "osx", "solaris"}
)
