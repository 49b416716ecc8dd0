"""An insertion-ordered map that compares keys by equality only."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class KeyValue:
    """A key paired with its value."""

    key: Any
    value: Any


class Map:
    """A map backed by a list, for keys that need not be hashable."""

    def __init__(self) -> None:
        self._items: list[KeyValue] = []

    def __len__(self) -> int:
        return len(self._items)

    def at(self, i: int) -> Any:
        """The value stored at position ``i``."""
        return self._items[i].value

    def index(self, key: Any) -> int | None:
        return next((i for i, pair in enumerate(self._items) if pair.key == key), None)

    def has(self, key: Any) -> bool:
        return any(pair.key == key for pair in self._items)

    def get(self, key: Any) -> Any:
        i = self.index(key)
        if i is None:
            raise KeyError(key)
        return self._items[i].value

    def try_get(self, key: Any) -> Any:
        i = self.index(key)
        return None if i is None else self._items[i].value

    def put(self, key: Any, value: Any) -> None:
        i = self.index(key)
        if i is None:
            self._items.append(KeyValue(key, value))
        else:
            self._items[i].value = value

    def delete(self, key: Any) -> None:
        """Remove ``key``; the last entry takes its place."""
        i = self.index(key)
        if i is None:
            raise KeyError(key)
        last = self._items.pop()
        if i < len(self._items):
            self._items[i] = last