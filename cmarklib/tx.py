"""Snapshots of mutable state that can be rolled back."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any


def _check_restorable(target: Any) -> None:
    if isinstance(target, (list, bytearray, dict, set)):
        return
    if hasattr(target, "__dict__"):
        return
    raise TypeError(f"cannot take a snapshot of {type(target).__name__!r}")


def _restore(target: Any, snapshot: Any) -> None:
    state = copy.deepcopy(snapshot)
    if isinstance(target, (list, bytearray)):
        target[:] = state
    elif isinstance(target, (dict, set)):
        target.clear()
        target.update(state)
    else:
        attrs = vars(target)
        attrs.clear()
        attrs.update(vars(state))


class Tx:
    """Remembers the state of an object so it can be restored in place."""

    def __init__(self, target: Any) -> None:
        _check_restorable(target)
        self._target = target
        self._snapshot = copy.deepcopy(target)

    def rollback(self) -> None:
        _restore(self._target, self._snapshot)


class Compound:
    """Several transactions rolled back together."""

    def __init__(self, items: Iterable[Tx]) -> None:
        self._items = list(items)

    def rollback(self) -> None:
        for item in self._items:
            item.rollback()