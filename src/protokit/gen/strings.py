"""Random string generation from a caller supplied alphabet."""

from __future__ import annotations

import operator
import random

from ..utils.errors import ConfigurationError
from .engines import thread_engine

__all__ = ["random_string_of_length_n"]


def random_string_of_length_n(
    length_of_rndstring: int,
    dist_chars: str,
    *,
    rng: random.Random | None = None,
) -> str:
    """Return ``length_of_rndstring`` characters drawn from ``dist_chars``.

    Characters are picked independently and with replacement, so the result
    may be longer than the alphabet and may repeat characters.
    """

    length_of_rndstring = operator.index(length_of_rndstring)
    if length_of_rndstring < 0:
        raise ConfigurationError("string length must not be negative")
    if not dist_chars and length_of_rndstring:
        raise ConfigurationError("alphabet must not be empty")

    engine = rng if rng is not None else thread_engine()
    return "".join(engine.choices(dist_chars, k=length_of_rndstring))
