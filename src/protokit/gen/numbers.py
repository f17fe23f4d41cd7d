"""Random numeric generators.

Integers and reals are drawn from a fresh engine per call unless an explicit
``rng`` is passed.  Fixed-length numbers use the per-thread engine.  None of
the unseeded results are reproducible; pass a seeded engine (see
:mod:`protokit.gen.engines`) when a test needs exact values.
"""

from __future__ import annotations

import math
import operator
import random

from ..numeric import count_digits
from ..numtypes import FLOAT64, INT, IntType, RealType
from ..utils.constants import NUMBER_DIGITS
from ..utils.errors import ConfigurationError, LengthOutOfRangeError
from ..utils.logging import trace_log
from .engines import fresh_engine, thread_engine

__all__ = [
    "random_integer_from_range_x_to_y",
    "random_real_from_range_x_to_y",
    "random_number_of_length_n",
    "max_length_for",
]


def random_integer_from_range_x_to_y(
    lower_boundary: int,
    upper_boundary: int,
    *,
    int_type: IntType | None = None,
    rng: random.Random | None = None,
) -> int:
    """Return an integer drawn uniformly from ``[lower_boundary, upper_boundary]``."""

    lower_boundary = operator.index(lower_boundary)
    upper_boundary = operator.index(upper_boundary)
    if lower_boundary > upper_boundary:
        raise ConfigurationError(
            f"lower boundary {lower_boundary} is greater than upper boundary {upper_boundary}"
        )
    if int_type is not None:
        for bound in (lower_boundary, upper_boundary):
            if not int_type.contains(bound):
                raise ConfigurationError(f"boundary {bound} does not fit in {int_type.name}")

    engine = rng if rng is not None else fresh_engine()
    result = engine.randint(lower_boundary, upper_boundary)
    trace_log("Random number", result)
    return result


def random_real_from_range_x_to_y(
    lower_boundary: float,
    upper_boundary: float,
    *,
    real_type: RealType = FLOAT64,
    rng: random.Random | None = None,
) -> float:
    """Return a real drawn uniformly from ``[lower_boundary, upper_boundary)``.

    The result is rounded to ``real_type``.  When rounding lands on the upper
    bound the next representable value below it is returned instead.  Ranges
    whose width overflows, or whose bounds overflow ``real_type``, raise
    :class:`ConfigurationError`.
    """

    lo = float(lower_boundary)
    hi = float(upper_boundary)
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise ConfigurationError("range boundaries must be finite")
    if lo > hi:
        raise ConfigurationError(f"lower boundary {lo} is greater than upper boundary {hi}")
    if not math.isfinite(hi - lo):
        raise ConfigurationError(f"range width {hi} - {lo} overflows a float64")
    if not (math.isfinite(real_type.coerce(lo)) and math.isfinite(real_type.coerce(hi))):
        raise ConfigurationError(f"range boundaries do not fit in {real_type.name}")

    engine = rng if rng is not None else fresh_engine()
    result = real_type.coerce(lo + (hi - lo) * engine.random())
    if result >= hi and hi > lo:
        result = max(real_type.next_below(hi), real_type.coerce(lo))
    trace_log("Random number", result)
    return result


def max_length_for(int_type: IntType) -> int:
    """Return the longest digit count :func:`random_number_of_length_n` accepts."""

    return count_digits(int_type.max_value) - 1


def random_number_of_length_n(
    length_of_number: int,
    int_type: IntType = INT,
    *,
    rng: random.Random | None = None,
) -> int:
    """Return a random integer with exactly ``length_of_number`` decimal digits.

    The first digit is never ``0``.  The length must be at least one and one
    digit shorter than the maximum value of ``int_type``, otherwise
    :class:`LengthOutOfRangeError` is raised.

    >>> random_number_of_length_n(4)  # doctest: +SKIP
    7302
    """

    length_of_number = operator.index(length_of_number)
    max_digits_of_type = count_digits(int_type.max_value)
    trace_log(f"max value for ({int_type.name})", int_type.max_value)
    if not 0 < length_of_number < max_digits_of_type:
        raise LengthOutOfRangeError(
            "Digits of requested number must be one less than type used "
            f"(requested {length_of_number}, {int_type.name} allows {max_digits_of_type - 1})."
        )

    engine = rng if rng is not None else thread_engine()
    first = engine.choice(NUMBER_DIGITS)
    while first == "0":
        first = engine.choice(NUMBER_DIGITS)
    rest = "".join(engine.choice(NUMBER_DIGITS) for _ in range(length_of_number - 1))
    trace_log("Digits drawn", first + rest)
    return int(first + rest)
