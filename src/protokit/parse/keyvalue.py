"""Key-value string deserialization.

Parses strings such as CGI query parameters, ``name=john&age=50``, using a
single-character element separator (between key and value) and item separator
(between pairs).

:func:`deserialize_key_value` reports malformed input through its return
value.  Pairs scanned before a failure are left in the output mapping; callers
that need all-or-nothing behaviour should parse into a scratch dict or use
:func:`parse_key_value`.
"""

from __future__ import annotations

from collections.abc import MutableMapping

from ..utils.errors import ConfigurationError, KeyValueParseError

__all__ = ["deserialize_key_value", "parse_key_value"]


def _check_separator(name: str, sep: str) -> None:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ConfigurationError(f"{name} must be a single character, got {sep!r}")


def deserialize_key_value(
    in_str: str,
    element_sep: str,
    item_sep: str,
    out_map: MutableMapping[str, str],
) -> bool:
    """Parse ``in_str`` into ``out_map``; return ``False`` on malformed input.

    Input is malformed when a key has no ``element_sep`` after it or when a
    key repeats (either within ``in_str`` or against an entry already in
    ``out_map``).  Values may be empty and may contain ``element_sep``.

    >>> m = {}
    >>> deserialize_key_value("name=john&age=50", "=", "&", m)
    True
    >>> m
    {'name': 'john', 'age': '50'}
    """

    _check_separator("element_sep", element_sep)
    _check_separator("item_sep", item_sep)

    begin = 0
    size = len(in_str)
    while begin < size:
        # key
        end = in_str.find(element_sep, begin)
        if end == -1:
            return False
        key = in_str[begin:end]
        begin = end + 1

        # value
        end = in_str.find(item_sep, begin)
        if end == -1:
            value = in_str[begin:]
            begin = size
        else:
            value = in_str[begin:end]
            begin = end + 1

        if key in out_map:
            return False
        out_map[key] = value
    return True


def parse_key_value(in_str: str, element_sep: str = "=", item_sep: str = "&") -> dict[str, str]:
    """Return the pairs in ``in_str`` as a new dict.

    Raises :class:`KeyValueParseError` (with the partially parsed pairs) when
    the input is malformed.
    """

    out: dict[str, str] = {}
    if not deserialize_key_value(in_str, element_sep, item_sep, out):
        raise KeyValueParseError(f"malformed key-value input: {in_str!r}", partial=out)
    return out
