from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from protokit.numeric import count_digits, equal_to_n_decimal_places, number_as_binary, to_string
from protokit.numtypes import INT8, INT64, UINT8
from protokit.utils.errors import ConfigurationError


@pytest.mark.parametrize(
    ("number", "expected"),
    [(0, 0), (7, 1), (10, 2), (999, 3), (2147483647, 10), (-123, 3)],
)
def test_count_digits(number: int, expected: int) -> None:
    assert count_digits(number) == expected


def test_count_digits_rejects_floats() -> None:
    with pytest.raises(TypeError):
        count_digits(1.5)  # type: ignore[arg-type]


def test_to_string_is_stable() -> None:
    assert to_string(1) == to_string(1) == "1"
    assert to_string("1") == to_string("1") == "1"
    assert to_string(1.2) == to_string(1.2) == "1.2"


def test_to_string_stream_formatting() -> None:
    assert to_string(3.14159265) == "3.14159"
    assert to_string(True) == "1"
    assert to_string(-42) == "-42"
    assert to_string(None) == "None"


def test_equal_to_n_decimal_places() -> None:
    assert equal_to_n_decimal_places(94.257, 94.257, 2) is True
    assert equal_to_n_decimal_places(94.257343432, 94.257, 3) is True
    assert equal_to_n_decimal_places(94.25, 94.26, 2) is False


def test_equal_is_tolerance_not_truncation() -> None:
    # 1.0 and 1.0009 share two decimals and differ by less than 0.01
    assert equal_to_n_decimal_places(1.0, 1.0009, 2) is True
    # 1.009 and 1.011 truncate differently but are within 0.01
    assert equal_to_n_decimal_places(1.009, 1.011, 2) is True


def test_number_as_binary_half_and_full() -> None:
    assert number_as_binary(2) == "0000000000000010"
    assert number_as_binary(2, shorten=False) == "00000000000000000000000000000010"


def test_number_as_binary_negative_twos_complement() -> None:
    assert number_as_binary(-1, shorten=False) == "1" * 32
    assert number_as_binary(-2, shorten=False, int_type=INT8) == "11111110"


def test_number_as_binary_other_widths() -> None:
    assert number_as_binary(5, int_type=UINT8) == "0101"
    assert len(number_as_binary(1, shorten=False, int_type=INT64)) == 64


def test_number_as_binary_out_of_range() -> None:
    with pytest.raises(ConfigurationError):
        number_as_binary(2**31)
    with pytest.raises(ConfigurationError):
        number_as_binary(-1, int_type=UINT8)


def test_number_as_binary_concurrent_calls() -> None:
    values = list(range(500))
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda v: number_as_binary(v, shorten=False), values))
    assert [int(bits, 2) for bits in results] == values


def test_equal_with_huge_tolerance() -> None:
    assert equal_to_n_decimal_places(1.0, 1000.0, -400) is True
    assert equal_to_n_decimal_places(1.0, 1.0, 400) is False
