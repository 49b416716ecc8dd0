"""Line, column and byte offset within a source buffer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Position:
    """A zero-based location in a source buffer."""

    ln: int = 0
    col: int = 0
    index: int = 0

    def __str__(self) -> str:
        return f"{self.ln + 1}:{self.col + 1}"