"""Seedable random data generator.

:class:`RandomDataGenerator` bundles the module level generators behind a
single engine.  Without a seed it draws from OS entropy like the module
functions do; with a seed every value it produces is reproducible, which is
what deterministic tests want.  :meth:`RandomDataGenerator.child` hands out
isolated sub-streams so that adding a draw in one place does not shift the
values produced elsewhere.
"""

from __future__ import annotations

import random

from ..config import ToolboxConfig
from ..numtypes import FLOAT64, IntType, RealType, int_type
from ..utils.constants import ALPHANUMERIC
from .engines import derive_engine, fresh_engine, seeded_engine
from .numbers import (
    random_integer_from_range_x_to_y,
    random_number_of_length_n,
    random_real_from_range_x_to_y,
)
from .strings import random_string_of_length_n


class RandomDataGenerator:
    """Generate random test data from one engine."""

    def __init__(
        self,
        seed: int | None = None,
        *,
        alphabet: str | None = None,
        default_int_type: IntType | None = None,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        seed:
            Optional seed.  ``None`` seeds from OS entropy.
        alphabet:
            Default alphabet for :meth:`string`.
        default_int_type:
            Default integer kind for :meth:`number_of_length`.
        """

        self.seed: int | None = seed
        self.alphabet: str | None = alphabet
        self.default_int_type: IntType | None = default_int_type
        self._rng: random.Random = fresh_engine() if seed is None else seeded_engine(seed)

    @classmethod
    def from_config(cls, cfg: ToolboxConfig) -> "RandomDataGenerator":
        """Build a generator from the ``generation`` section of ``cfg``."""

        gen = cfg.generation
        return cls(
            gen.seed,
            alphabet=gen.default_alphabet,
            default_int_type=int_type(gen.default_int_type),
        )

    @property
    def rng(self) -> random.Random:
        return self._rng

    def child(self, label: str) -> "RandomDataGenerator":
        """Return a generator for the sub-stream named ``label``.

        Seeded parents produce reproducible children; unseeded parents
        produce unseeded children.
        """

        clone = RandomDataGenerator(
            alphabet=self.alphabet, default_int_type=self.default_int_type
        )
        if self.seed is not None:
            clone.seed = self.seed
            clone._rng = derive_engine(self.seed, label)
        return clone

    def integer(self, lo: int, hi: int, *, int_type: IntType | None = None) -> int:
        return random_integer_from_range_x_to_y(lo, hi, int_type=int_type, rng=self._rng)

    def real(self, lo: float, hi: float, *, real_type: RealType = FLOAT64) -> float:
        return random_real_from_range_x_to_y(lo, hi, real_type=real_type, rng=self._rng)

    def number_of_length(self, length: int, int_type: IntType | None = None) -> int:
        kind = int_type or self.default_int_type
        if kind is None:
            return random_number_of_length_n(length, rng=self._rng)
        return random_number_of_length_n(length, kind, rng=self._rng)

    def string(self, length: int, alphabet: str | None = None) -> str:
        """Return a random string, using the default alphabet when none is given."""

        chars = alphabet if alphabet is not None else self.alphabet
        if chars is None:
            chars = ALPHANUMERIC
        return random_string_of_length_n(length, chars, rng=self._rng)
