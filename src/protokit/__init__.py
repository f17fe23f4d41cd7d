"""protokit: a toolbox for fast prototyping and random test data.

The helpers are independent of each other and can be imported from the top
level package::

    import protokit as pk

    pk.random_number_of_length_n(4)          # e.g. 7302
    pk.random_string_of_length_n(10, "abcd") # e.g. "cabddacbba"
    pk.number_as_binary(2)                   # "0000000000000010"

The command line interface lives in :mod:`protokit.cli`.
"""

from .gen import (
    RandomDataGenerator,
    random_integer_from_range_x_to_y,
    random_number_of_length_n,
    random_real_from_range_x_to_y,
    random_string_of_length_n,
)
from .lookup import KeyVal, LabelTable
from .numeric import count_digits, equal_to_n_decimal_places, number_as_binary, to_string
from .numtypes import FLOAT32, FLOAT64, INT, INT32, INT64, SIZE_T, IntType, RealType
from .parse import deserialize_key_value, parse_key_value
from .system import execute, get_platform_name
from .utils.datefmt import get_current_timestamp
from .utils.errors import (
    CommandTimeoutError,
    ConfigurationError,
    ExecutionError,
    KeyValueParseError,
    LengthOutOfRangeError,
    ToolboxError,
)
from .utils.logging import log, log_once

__version__ = "0.1.0"

__all__ = [
    "CommandTimeoutError",
    "ConfigurationError",
    "ExecutionError",
    "FLOAT32",
    "FLOAT64",
    "INT",
    "INT32",
    "INT64",
    "IntType",
    "KeyVal",
    "KeyValueParseError",
    "LabelTable",
    "LengthOutOfRangeError",
    "RandomDataGenerator",
    "RealType",
    "SIZE_T",
    "ToolboxError",
    "count_digits",
    "deserialize_key_value",
    "equal_to_n_decimal_places",
    "execute",
    "get_current_timestamp",
    "get_platform_name",
    "log",
    "log_once",
    "number_as_binary",
    "parse_key_value",
    "random_integer_from_range_x_to_y",
    "random_number_of_length_n",
    "random_real_from_range_x_to_y",
    "random_string_of_length_n",
    "to_string",
]
