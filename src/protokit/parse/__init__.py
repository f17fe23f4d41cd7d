"""Parsers for simple delimited text."""

from .keyvalue import deserialize_key_value, parse_key_value

__all__ = ["deserialize_key_value", "parse_key_value"]
