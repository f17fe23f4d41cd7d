"""Fixed-width numeric kinds.

Python integers are unbounded, so helpers that depend on the width of a
machine type (digit limits, bit rendering, single precision comparisons) take
an explicit :class:`IntType` or :class:`RealType`.  Limits and rounding are
delegated to numpy dtypes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import numpy as np

from .utils.errors import ConfigurationError

__all__ = [
    "IntType",
    "RealType",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "INT",
    "SIZE_T",
    "FLOAT32",
    "FLOAT64",
    "int_type",
    "real_type",
]


@dataclass(frozen=True)
class IntType:
    """A fixed-width integer kind such as ``int32`` or ``uint64``."""

    name: str
    bits: int
    signed: bool

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(f"{'int' if self.signed else 'uint'}{self.bits}")

    @property
    def min_value(self) -> int:
        return int(np.iinfo(self.dtype).min)

    @property
    def max_value(self) -> int:
        return int(np.iinfo(self.dtype).max)

    def contains(self, value: int) -> bool:
        """Return ``True`` if ``value`` is representable by this kind."""

        return self.min_value <= value <= self.max_value


@dataclass(frozen=True)
class RealType:
    """A floating point kind, ``float32`` or ``float64``."""

    name: str
    bits: int

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(f"float{self.bits}")

    def coerce(self, value: float) -> float:
        """Round ``value`` to this precision and return it as a Python float.

        Values beyond the range of the kind become infinite.
        """

        with np.errstate(over="ignore"):
            return float(self.dtype.type(value))

    def next_below(self, value: float) -> float:
        """Return the largest representable value strictly below ``value``."""

        scalar = self.dtype.type(value)
        return float(np.nextafter(scalar, self.dtype.type(-np.inf)))


INT8: Final = IntType("int8", 8, True)
INT16: Final = IntType("int16", 16, True)
INT32: Final = IntType("int32", 32, True)
INT64: Final = IntType("int64", 64, True)
UINT8: Final = IntType("uint8", 8, False)
UINT16: Final = IntType("uint16", 16, False)
UINT32: Final = IntType("uint32", 32, False)
UINT64: Final = IntType("uint64", 64, False)

# C-style aliases
INT: Final = INT32
SIZE_T: Final = UINT64

FLOAT32: Final = RealType("float32", 32)
FLOAT64: Final = RealType("float64", 64)

_INT_TYPES: dict[str, IntType] = {
    t.name: t for t in (INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64)
}
_INT_TYPES.update({"int": INT, "size_t": SIZE_T})

_REAL_TYPES: dict[str, RealType] = {
    "float32": FLOAT32,
    "float64": FLOAT64,
    "float": FLOAT32,
    "double": FLOAT64,
}


def int_type(name: str) -> IntType:
    """Look up an :class:`IntType` by name (e.g. ``"int32"``, ``"size_t"``)."""

    try:
        return _INT_TYPES[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(_INT_TYPES))
        raise ConfigurationError(f"unknown integer type '{name}' (expected one of: {known})") from None


def real_type(name: str) -> RealType:
    """Look up a :class:`RealType` by name (e.g. ``"float"``, ``"float64"``)."""

    try:
        return _REAL_TYPES[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(_REAL_TYPES))
        raise ConfigurationError(f"unknown real type '{name}' (expected one of: {known})") from None
