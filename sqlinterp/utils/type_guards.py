"""Type guard functions for runtime type checking in sqlinterp.

This module provides type-safe runtime checks that help the type checker
understand type narrowing, replacing defensive hasattr() and duck typing patterns.
"""

from collections.abc import Sequence
from datetime import datetime
from numbers import Integral, Real
from typing import TYPE_CHECKING, Any, Final

from sqlinterp.protocols import ValuerProtocol

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

__all__ = (
    "BYTES_TYPES",
    "is_iterable_parameters",
    "is_scalar_sequence",
    "is_valuer",
    "scalar_kind",
)

BYTES_TYPES: Final = (bytes, bytearray, memoryview)


def is_valuer(obj: Any) -> "TypeGuard[ValuerProtocol]":
    """Check if an object can resolve itself to a plain value.

    Args:
        obj: The object to check

    Returns:
        True if the object implements ``ValuerProtocol``, False otherwise
    """
    return isinstance(obj, ValuerProtocol)


def is_iterable_parameters(params: Any) -> "TypeGuard[Sequence[Any]]":
    """Check if parameters are an ordered sequence (but not text or bytes).

    Args:
        params: The parameters to check

    Returns:
        True if the parameters are a sequence of values, False otherwise
    """
    return isinstance(params, Sequence) and not isinstance(params, (str, *BYTES_TYPES))


def scalar_kind(value: Any) -> str | None:
    """Classify a value as one of the scalar kinds the formatter renders natively.

    Args:
        value: The value to classify

    Returns:
        The kind name, or None for ``None``, containers, valuers and unrecognized types
    """
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, Integral):
        return "integer"
    if isinstance(value, Real):
        return "float"
    if isinstance(value, str):
        return "text"
    if isinstance(value, BYTES_TYPES):
        return "bytes"
    if isinstance(value, datetime):
        return "timestamp"
    return None


def is_scalar_sequence(items: "Sequence[Any]") -> bool:
    """Check if every element of a sequence shares a single scalar kind.

    An empty sequence counts as homogeneous.

    Args:
        items: The sequence to inspect

    Returns:
        True if the sequence should render as a parenthesized value list
    """
    kinds = {scalar_kind(item) for item in items}
    return len(kinds) <= 1 and None not in kinds
