"""Errors tied to a source span, and groups of errors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from .position import Position


class SourceError(Exception):
    """An error located between two positions of the source."""

    def __init__(self, start: Position, end: Position, message: str) -> None:
        super().__init__(message)
        self.start = replace(start)
        self.end = replace(end)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.start.ln + 1}:{self.start.col + 1}] => {self.message}"


class ErrorGroup(Exception):
    """Several errors raised together."""

    def __init__(self, errors: Iterable[BaseException] = ()) -> None:
        super().__init__()
        self._errors: list[BaseException] = list(errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self._errors)

    def push(self, error: BaseException) -> None:
        self._errors.append(error)

    def pop(self) -> BaseException | None:
        """Remove and return the last error, or None when empty."""
        return self._errors.pop() if self._errors else None

    def __str__(self) -> str:
        return "".join(str(err) for err in self._errors)