"""Value-to-literal formatting.

Converts one argument value into SQL literal text:

- ``None`` and failing valuers render as ``NULL``
- booleans, integers and floats render unquoted
- text, bytes and timestamps render single-quoted
- sequences render as ``ARRAY[...]`` or as a parenthesized value list,
  formatting each element recursively
- anything else renders as an escaped string of its ``str()`` text

Formatting never raises for any argument value.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime
from functools import singledispatch
from numbers import Integral, Real
from typing import Any

from sqlinterp.core.config import InterpolationConfig, get_default_config
from sqlinterp.core.values import Opaque, SQLArray, ValueList
from sqlinterp.utils.logging import get_logger
from sqlinterp.utils.type_guards import is_scalar_sequence, is_valuer

__all__ = (
    "NULL_LITERAL",
    "escape_string",
    "format_argument",
    "format_array",
    "format_bytes",
    "format_timestamp",
    "format_value_list",
)

logger = get_logger("sqlinterp.core.formatting")

NULL_LITERAL = "NULL"


def escape_string(text: str) -> str:
    """Quote text as a SQL string literal, doubling embedded single quotes.

    Args:
        text: Raw text

    Returns:
        Single-quoted literal
    """
    escaped = text.replace("'", "''")
    return f"'{escaped}'"


def format_bytes(data: "bytes | bytearray | memoryview") -> str:
    """Format raw bytes as a hex escape literal, e.g. ``'\\x010203'``."""
    return f"'\\x{bytes(data).hex()}'"


def format_timestamp(value: datetime) -> str:
    """Format a timestamp with microsecond precision in its own wall-clock time.

    The offset of an aware timestamp is dropped, not applied.
    """
    text = value.replace(tzinfo=None).isoformat(sep=" ", timespec="microseconds")
    return f"'{text}'"


def format_array(items: "Iterable[Any]", config: "InterpolationConfig | None" = None) -> str:
    """Format values as an ``ARRAY[...]`` constructor."""
    elements = ",".join(format_argument(item, config) for item in items)
    return f"ARRAY[{elements}]"


def format_value_list(items: "Iterable[Any]", config: "InterpolationConfig | None" = None) -> str:
    """Format values as a parenthesized, comma-separated list."""
    elements = ",".join(format_argument(item, config) for item in items)
    return f"({elements})"


def format_argument(value: Any, config: "InterpolationConfig | None" = None) -> str:
    """Convert a value to its SQL literal representation.

    Valuers are resolved first, then configured type coercions are applied,
    then the value is formatted by type.

    Args:
        value: Argument value
        config: Interpolation configuration (defaults to the shared default)

    Returns:
        SQL literal text
    """
    if value is None:
        return NULL_LITERAL

    cfg = config if config is not None else get_default_config()

    if is_valuer(value):
        try:
            value = value.sql_value()
        except Exception:
            logger.debug("Valuer %s failed to resolve, formatting as NULL", type(value).__name__, exc_info=True)
            return NULL_LITERAL
        if value is None:
            return NULL_LITERAL

    value = cfg.coerce(value)
    if value is None:
        return NULL_LITERAL
    return _format_by_type(value, cfg)


def _to_text(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        logger.debug("str() failed for %s, using default repr", type(value).__name__, exc_info=True)
        return object.__repr__(value)


@singledispatch
def _format_by_type(value: Any, config: InterpolationConfig) -> str:
    """Fallback for unrecognized types: escaped ``str()`` text."""
    return escape_string(_to_text(value))


@_format_by_type.register
def _(value: bool, config: InterpolationConfig) -> str:
    return "true" if value else "false"


@_format_by_type.register
def _(value: Integral, config: InterpolationConfig) -> str:
    return str(int(value))


@_format_by_type.register
def _(value: Real, config: InterpolationConfig) -> str:
    try:
        number = float(value)
    except (OverflowError, ValueError):
        logger.debug("%s does not fit a float, formatting as text", type(value).__name__, exc_info=True)
        return escape_string(_to_text(value))
    return f"{number:.{config.float_precision}f}"


@_format_by_type.register
def _(value: str, config: InterpolationConfig) -> str:
    return escape_string(value)


@_format_by_type.register(bytes)
@_format_by_type.register(bytearray)
@_format_by_type.register(memoryview)
def _(value: "bytes | bytearray | memoryview", config: InterpolationConfig) -> str:
    return format_bytes(value)


@_format_by_type.register
def _(value: datetime, config: InterpolationConfig) -> str:
    return format_timestamp(value)


@_format_by_type.register
def _(value: SQLArray, config: InterpolationConfig) -> str:
    return format_array(value.items, config)


@_format_by_type.register
def _(value: ValueList, config: InterpolationConfig) -> str:
    return format_value_list(value.items, config)


@_format_by_type.register
def _(value: Opaque, config: InterpolationConfig) -> str:
    try:
        text = value.to_text()
    except Exception:
        logger.debug("Opaque renderer failed for %s, using default text", type(value.value).__name__, exc_info=True)
        text = _to_text(value.value)
    return escape_string(text)


@_format_by_type.register
def _(value: Sequence, config: InterpolationConfig) -> str:
    # homogeneous scalar collections render as a value list, everything else as ARRAY
    if is_scalar_sequence(value):
        return format_value_list(value, config)
    return format_array(value, config)
