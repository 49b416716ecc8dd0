"""A cursor over a byte buffer that produces tokens."""

from __future__ import annotations

import copy
from dataclasses import replace

from .errors import SourceError
from .position import Position
from .token import Token, TokenPointer


class Pointer:
    """Tracks a start and end position within a source buffer."""

    def __init__(self, src: bytes | bytearray | str) -> None:
        if isinstance(src, str):
            src = src.encode("utf-8")
        self.src = bytes(src)
        self.start = Position()
        self.end = Position()
        self.tokens = TokenPointer()

    def is_sof(self) -> bool:
        return self.start.index == 0

    def is_eof(self) -> bool:
        return self.end.index >= len(self.src)

    def curr(self) -> int:
        """The byte at the start position, or 0 past the end."""
        if self.start.index >= len(self.src):
            return 0
        return self.src[self.start.index]

    def peek(self) -> int:
        """The byte at the end position, or 0 at end of input."""
        if self.is_eof():
            return 0
        return self.src[self.end.index]

    def next(self) -> int:
        """Advance the end position by one byte and return the new peek."""
        self.end.index += 1
        self.end.col += 1
        if self.peek() == ord("\n"):
            self.end.ln += 1
            self.end.col = 0
        return self.peek()

    def to_bytes(self) -> bytes:
        return self.src[self.start.index:self.end.index]

    def to_error(self, message: str) -> SourceError:
        return SourceError(self.start, self.end, message)

    def create(self, kind: int) -> Token:
        """Make a token from the current span and record it."""
        token = Token(int(kind), replace(self.start), replace(self.end), self.to_bytes())
        self.tokens.next(copy.deepcopy(token))
        return token