"""Numeric and string formatting helpers.

``equal_to_n_decimal_places`` is a tolerance check, ``|a - b| < 10**-n`` in
single precision.  It does not truncate to ``n`` decimal places; near large
magnitudes a float32 cannot resolve steps of ``10**-n`` at all and the check
becomes an exact comparison.
"""

from __future__ import annotations

import numbers
import operator
from typing import Any

import numpy as np

from .numtypes import FLOAT32, INT32, IntType
from .utils.errors import ConfigurationError

__all__ = [
    "count_digits",
    "to_string",
    "equal_to_n_decimal_places",
    "number_as_binary",
]


def count_digits(number: int) -> int:
    """Return the number of base-10 digits in ``number``.

    Counted by repeated integer division, so ``count_digits(0)`` is ``0``.
    Negative numbers count the digits of their magnitude.
    """

    number = abs(operator.index(number))
    count = 0
    while number != 0:
        number //= 10
        count += 1
    return count


def to_string(value: Any) -> str:
    """Format ``value`` the way an output stream would.

    Integers print in decimal (``True`` as ``1``), reals with six significant
    digits, strings unchanged.
    """

    if isinstance(value, str):
        return value
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return format(float(value), "g")
    return str(value)


def equal_to_n_decimal_places(a: float, b: float, decimal_places: int) -> bool:
    """Return ``True`` if ``a`` and ``b`` differ by less than ``10**-decimal_places``.

    A very negative ``decimal_places`` makes the tolerance infinite, so any
    two finite values compare equal.
    """

    single = FLOAT32.dtype.type
    with np.errstate(over="ignore", under="ignore"):
        epsilon = single(np.power(np.float64(10.0), -decimal_places))
        diff = np.abs(single(a) - single(b))
    return bool(diff < epsilon)


def number_as_binary(num: int, shorten: bool = True, int_type: IntType = INT32) -> str:
    """Render ``num`` as a string of ``0``/``1`` bits, most significant first.

    The string is zero padded to the width of ``int_type``; negative values
    use two's complement.  ``shorten`` keeps only the low half of the bits.
    """

    num = operator.index(num)
    if not int_type.contains(num):
        raise ConfigurationError(f"{num} does not fit in {int_type.name}")
    bits = np.binary_repr(num, width=int_type.bits)
    if shorten:
        return bits[-(int_type.bits // 2) :]
    return bits
