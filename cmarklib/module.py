"""Named modules."""

from __future__ import annotations

from typing import Any


class Module:
    """Base for named modules.

    Subclasses set their name with ``class Foo(Module, name="foo")``;
    without it the lower-cased class name is used.
    """

    _module_name: str = "module"

    def __init_subclass__(cls, name: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._module_name = name if name is not None else cls.__name__.lower()

    @classmethod
    def name(cls) -> str:
        return cls._module_name