"""Success and failure values, and groups of them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Ok:
    """A successful outcome."""

    value: Any

    def __str__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err:
    """A failed outcome."""

    error: Any

    def __str__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok, Err]


class ResultGroup:
    """An ordered collection of outcomes."""

    def __init__(self, results: Iterable[Result] = ()) -> None:
        self._results: list[Result] = list(results)

    def __len__(self) -> int:
        return len(self._results)

    def push(self, result: Result) -> None:
        self._results.append(result)

    def pop(self) -> Result | None:
        """Remove and return the last outcome, or None when empty."""
        return self._results.pop() if self._results else None

    def __str__(self) -> str:
        return "".join(str(result) for result in self._results)