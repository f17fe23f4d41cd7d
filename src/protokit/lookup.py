"""Static key/label tables.

A :class:`LabelTable` is a fixed, ordered sequence of :class:`KeyVal` pairs,
handy for option menus in prototypes::

    CASE_OPTS = LabelTable.from_labels(["upper", "lower", "mixed"])
    CASE_OPTS.get(1)   # "lower"
    CASE_OPTS.get(4)   # None

Lookups of unknown keys return ``None`` and positional access outside the
table raises :class:`IndexError`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import overload

from .utils.errors import ConfigurationError

__all__ = ["KeyVal", "LabelTable"]


@dataclass(frozen=True)
class KeyVal:
    """An integer key paired with a display label."""

    key: int
    value: str


class LabelTable(Sequence[KeyVal]):
    """Immutable ordered table of :class:`KeyVal` entries."""

    def __init__(self, entries: Iterable[KeyVal | tuple[int, str]]) -> None:
        items: list[KeyVal] = []
        index: dict[int, str] = {}
        for entry in entries:
            kv = entry if isinstance(entry, KeyVal) else KeyVal(*entry)
            if kv.key in index:
                raise ConfigurationError(f"duplicate key {kv.key} in label table")
            index[kv.key] = kv.value
            items.append(kv)
        self._items: tuple[KeyVal, ...] = tuple(items)
        self._index = index

    @classmethod
    def from_labels(cls, labels: Iterable[str], start: int = 0) -> "LabelTable":
        """Build a table numbering ``labels`` from ``start``."""

        return cls(KeyVal(i, label) for i, label in enumerate(labels, start))

    @overload
    def __getitem__(self, position: int) -> KeyVal: ...

    @overload
    def __getitem__(self, position: slice) -> tuple[KeyVal, ...]: ...

    def __getitem__(self, position: int | slice) -> KeyVal | tuple[KeyVal, ...]:
        return self._items[position]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[KeyVal]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, KeyVal):
            return self._index.get(item.key) == item.value
        return item in self._index

    def __repr__(self) -> str:
        return f"LabelTable({list(self._items)!r})"

    def get(self, key: int, default: str | None = None) -> str | None:
        """Return the label for ``key`` or ``default`` when not found."""

        return self._index.get(key, default)

    def keys(self) -> list[int]:
        return [kv.key for kv in self._items]

    def labels(self) -> list[str]:
        return [kv.value for kv in self._items]
