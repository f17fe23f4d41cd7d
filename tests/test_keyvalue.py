from __future__ import annotations

import pytest

from protokit.parse import deserialize_key_value, parse_key_value
from protokit.utils.errors import ConfigurationError, KeyValueParseError


def test_cgi_style_pairs() -> None:
    out_map: dict[str, str] = {}
    worked = deserialize_key_value("name=john&age=50", "=", "&", out_map)
    assert worked
    assert len(out_map) == 2
    assert out_map["name"] == "john"
    assert out_map["age"] == "50"


def test_duplicate_key_fails_with_partial_fill() -> None:
    out_map: dict[str, str] = {}
    assert deserialize_key_value("a=1&b=2&a=3&c=4", "=", "&", out_map) is False
    assert out_map == {"a": "1", "b": "2"}


def test_key_already_in_mapping_fails() -> None:
    out_map = {"name": "jane"}
    assert deserialize_key_value("name=john", "=", "&", out_map) is False
    assert out_map == {"name": "jane"}


def test_trailing_key_without_value_fails() -> None:
    out_map: dict[str, str] = {}
    assert deserialize_key_value("a=1&b", "=", "&", out_map) is False
    assert out_map == {"a": "1"}


def test_no_element_separator_fails() -> None:
    out_map: dict[str, str] = {}
    assert deserialize_key_value("justtext", "=", "&", out_map) is False
    assert out_map == {}


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", {}),
        ("a=", {"a": ""}),
        ("a=1&", {"a": "1"}),
        ("=1", {"": "1"}),
        ("a=b=c", {"a": "b=c"}),
        ("a=&b=2", {"a": "", "b": "2"}),
    ],
)
def test_edge_cases(text: str, expected: dict[str, str]) -> None:
    out_map: dict[str, str] = {}
    assert deserialize_key_value(text, "=", "&", out_map) is True
    assert out_map == expected


def test_custom_separators() -> None:
    out_map: dict[str, str] = {}
    assert deserialize_key_value("host:db1;port:5432", ":", ";", out_map)
    assert out_map == {"host": "db1", "port": "5432"}


def test_insertion_order_preserved() -> None:
    out_map: dict[str, str] = {}
    deserialize_key_value("z=1&a=2&m=3", "=", "&", out_map)
    assert list(out_map) == ["z", "a", "m"]


def test_separator_must_be_single_character() -> None:
    with pytest.raises(ConfigurationError):
        deserialize_key_value("a==1", "==", "&", {})
    with pytest.raises(ConfigurationError):
        deserialize_key_value("a=1", "=", "", {})


def test_parse_key_value() -> None:
    assert parse_key_value("name=john&age=50") == {"name": "john", "age": "50"}
    with pytest.raises(KeyValueParseError) as excinfo:
        parse_key_value("a=1&a=2")
    assert excinfo.value.partial == {"a": "1"}
