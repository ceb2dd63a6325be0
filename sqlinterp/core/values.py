"""Explicit value variants for literal formatting.

Plain Python sequences are classified by their elements: a sequence whose
elements all share one scalar kind renders as a parenthesized value list,
anything else as an ``ARRAY[...]`` constructor. These wrappers pin the form
explicitly, and :class:`Opaque` pins the generic text fallback.
"""

from collections.abc import Callable, Iterable
from typing import Any

from mypy_extensions import mypyc_attr

__all__ = ("Opaque", "SQLArray", "ValueList")


@mypyc_attr(allow_interpreted_subclasses=False)
class SQLArray:
    """Sequence of values rendered as ``ARRAY[e1,e2,...]``.

    Attributes:
        items: The wrapped values
    """

    __slots__ = ("items",)

    def __init__(self, items: "Iterable[Any]" = ()) -> None:
        self.items: tuple[Any, ...] = tuple(items)

    def __iter__(self) -> Any:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SQLArray):
            return NotImplemented
        return self.items == other.items

    def __hash__(self) -> int:
        return hash((SQLArray, self.items))

    def __repr__(self) -> str:
        return f"SQLArray({list(self.items)!r})"


@mypyc_attr(allow_interpreted_subclasses=False)
class ValueList:
    """Collection of scalar values rendered as ``(e1,e2,...)``.

    Typical use is the right-hand side of ``IN`` or ``ANY``.

    Attributes:
        items: The wrapped values
    """

    __slots__ = ("items",)

    def __init__(self, items: "Iterable[Any]" = ()) -> None:
        self.items: tuple[Any, ...] = tuple(items)

    def __iter__(self) -> Any:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueList):
            return NotImplemented
        return self.items == other.items

    def __hash__(self) -> int:
        return hash((ValueList, self.items))

    def __repr__(self) -> str:
        return f"ValueList({list(self.items)!r})"


@mypyc_attr(allow_interpreted_subclasses=False)
class Opaque:
    """Value rendered through a caller-supplied text conversion.

    The rendered text is quoted and escaped like any other string.

    Attributes:
        value: The wrapped object
        render: Callable producing the text for ``value``
    """

    __slots__ = ("render", "value")

    def __init__(self, value: Any, render: "Callable[[Any], str]" = str) -> None:
        self.value = value
        self.render = render

    def to_text(self) -> str:
        """Render the wrapped value to text."""
        return self.render(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Opaque):
            return NotImplemented
        return self.value == other.value and self.render == other.render

    def __hash__(self) -> int:
        return hash((Opaque, self.render))

    def __repr__(self) -> str:
        render_name = getattr(self.render, "__name__", repr(self.render))
        return f"Opaque({self.value!r}, render={render_name})"
