"""HTML escaping and renderable elements."""

from __future__ import annotations

import io
import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TextIO

from .results import Err, Ok

_ESCAPES = {
    ">": "&gt;",
    "<": "&lt;",
    '"': "&quot;",
    "&": "&amp;",
    "'": "&apos;",
}


def escape(text: str) -> str:
    """Escape the characters that are special in HTML."""
    return "".join(_ESCAPES.get(c, c) for c in text)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def render_value(value: Any, writer: TextIO) -> None:
    """Write ``value`` as HTML; text is escaped, elements render themselves."""
    if isinstance(value, HTMLElement):
        value.render_into(writer)
    elif value is None:
        return
    elif isinstance(value, bool):
        writer.write("true" if value else "false")
    elif isinstance(value, int):
        writer.write(str(value))
    elif isinstance(value, float):
        writer.write(_format_float(value))
    elif isinstance(value, str):
        writer.write(escape(value))
    elif isinstance(value, Ok):
        render_value(value.value, writer)
    elif isinstance(value, Err):
        render_value(value.error, writer)
    elif isinstance(value, (list, tuple)):
        for item in value:
            render_value(item, writer)
    else:
        raise TypeError(f"cannot render {type(value).__name__!r} as HTML")


def render(value: Any) -> str:
    """Render ``value`` to an HTML string."""
    buf = io.StringIO()
    render_value(value, buf)
    return buf.getvalue()


class HTMLElement(ABC):
    """Something that renders itself as HTML."""

    def render(self) -> str:
        buf = io.StringIO()
        self.render_into(buf)
        return buf.getvalue()

    @abstractmethod
    def render_into(self, writer: TextIO) -> None:
        """Write this element's HTML to ``writer``."""


@dataclass(frozen=True)
class Raw(HTMLElement):
    """HTML text written as-is, without escaping."""

    html: str

    def render_into(self, writer: TextIO) -> None:
        writer.write(self.html)


class Fragment(HTMLElement):
    """A sequence of children rendered one after another."""

    def __init__(self, children: Iterable[Any] = ()) -> None:
        self.children = list(children)

    def render_into(self, writer: TextIO) -> None:
        for child in self.children:
            render_value(child, writer)


class HTMLDocument(HTMLElement):
    """The document type declaration."""

    def render_into(self, writer: TextIO) -> None:
        writer.write("<!DOCTYPE html>")