"""Randomized generation of integers, reals, digit strings and text."""

from .engines import derive_engine, fresh_engine, seeded_engine, thread_engine
from .generator import RandomDataGenerator
from .numbers import (
    max_length_for,
    random_integer_from_range_x_to_y,
    random_number_of_length_n,
    random_real_from_range_x_to_y,
)
from .strings import random_string_of_length_n

__all__ = [
    "RandomDataGenerator",
    "derive_engine",
    "fresh_engine",
    "max_length_for",
    "random_integer_from_range_x_to_y",
    "random_number_of_length_n",
    "random_real_from_range_x_to_y",
    "random_string_of_length_n",
    "seeded_engine",
    "thread_engine",
]
