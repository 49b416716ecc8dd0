"""Tokens produced while scanning a source buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .errors import SourceError
from .position import Position


class Kind(IntEnum):
    """Token kinds."""

    EOF = 0


@dataclass
class Token:
    """A span of source bytes with a kind."""

    kind: int = 0
    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)
    value: bytes = b""

    def to_error(self, message: str) -> SourceError:
        return SourceError(self.start, self.end, message)

    def __str__(self) -> str:
        return self.value.decode("utf-8")


@dataclass
class TokenPointer:
    """The previous and current token of a scan."""

    prev: Token = field(default_factory=Token)
    curr: Token = field(default_factory=Token)

    def next(self, token: Token) -> None:
        self.prev = self.curr
        self.curr = token