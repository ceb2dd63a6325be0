"""Interpolation configuration.

Components:
- ParameterStyle enum: placeholder styles the scanner can recognize
- InterpolationConfig: recognized styles, float precision and type coercions
- Environment loading: ``SQLINTERP_*`` variables mapped onto a config
"""

import os
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any, Final

from mypy_extensions import mypyc_attr
from typing_extensions import Self

from sqlinterp.exceptions import ImproperConfigurationError
from sqlinterp.utils.logging import get_logger

__all__ = (
    "DEFAULT_FLOAT_PRECISION",
    "DEFAULT_PARAMETER_STYLES",
    "InterpolationConfig",
    "ParameterStyle",
    "get_default_config",
    "load_config_from_env",
)

logger = get_logger("sqlinterp.core.config")


class ParameterStyle(str, Enum):
    """Parameter style enumeration.

    Supported parameter styles:
    - QMARK: ? placeholders
    - NUMERIC: $1, $2 placeholders
    """

    QMARK = "qmark"
    NUMERIC = "numeric"


DEFAULT_PARAMETER_STYLES: Final = frozenset({ParameterStyle.QMARK, ParameterStyle.NUMERIC})
DEFAULT_FLOAT_PRECISION: Final = 6


@mypyc_attr(allow_interpreted_subclasses=False)
class InterpolationConfig:
    """Configuration for placeholder scanning and literal formatting.

    Instances are treated as immutable; use :meth:`replace` to derive a
    modified copy.
    """

    __slots__ = ("float_precision", "parameter_styles", "type_coercion_map")

    def __init__(
        self,
        parameter_styles: "Iterable[ParameterStyle] | None" = None,
        float_precision: int = DEFAULT_FLOAT_PRECISION,
        type_coercion_map: "dict[type, Callable[[Any], Any]] | None" = None,
    ) -> None:
        """Initialize interpolation configuration.

        Args:
            parameter_styles: Placeholder styles to recognize (defaults to QMARK and NUMERIC)
            float_precision: Digits rendered after the decimal point for floats
            type_coercion_map: Per-type conversions applied before formatting

        Raises:
            ImproperConfigurationError: If the settings are unusable
        """
        self.parameter_styles: frozenset[ParameterStyle] = (
            frozenset(parameter_styles) if parameter_styles is not None else DEFAULT_PARAMETER_STYLES
        )
        self.float_precision = float_precision
        self.type_coercion_map: dict[type, Callable[[Any], Any]] = dict(type_coercion_map or {})
        self.validate()

    def validate(self) -> None:
        """Check the configuration for unusable values.

        Raises:
            ImproperConfigurationError: If no style is enabled, a style is unknown,
                or the float precision is negative
        """
        if not self.parameter_styles:
            msg = "At least one parameter style must be enabled."
            raise ImproperConfigurationError(msg)
        unknown = [style for style in self.parameter_styles if not isinstance(style, ParameterStyle)]
        if unknown:
            msg = f"Unsupported parameter styles: {unknown!r}"
            raise ImproperConfigurationError(msg)
        if isinstance(self.float_precision, bool) or not isinstance(self.float_precision, int):
            msg = f"float_precision must be an integer, got {type(self.float_precision).__name__}"
            raise ImproperConfigurationError(msg)
        if self.float_precision < 0:
            msg = f"float_precision must not be negative, got {self.float_precision}"
            raise ImproperConfigurationError(msg)

    def coerce(self, value: Any) -> Any:
        """Apply the type coercion registered for the value's type, if any.

        The lookup walks the value's MRO so a converter registered for a base
        class also applies to subclasses.

        Args:
            value: Argument value

        Returns:
            The converted value, or the value unchanged
        """
        if not self.type_coercion_map:
            return value
        for klass in type(value).__mro__:
            converter = self.type_coercion_map.get(klass)
            if converter is not None:
                return converter(value)
        return value

    def replace(self, **changes: Any) -> Self:
        """Return a copy with the given attributes replaced.

        Args:
            **changes: Constructor arguments to override

        Returns:
            New configuration instance
        """
        values: dict[str, Any] = {
            "parameter_styles": self.parameter_styles,
            "float_precision": self.float_precision,
            "type_coercion_map": self.type_coercion_map,
        }
        values.update(changes)
        return type(self)(**values)

    def hash(self) -> int:
        """Generate hash for cache key generation.

        Returns:
            Hash value for cache key generation
        """
        return hash((
            frozenset(style.value for style in self.parameter_styles),
            self.float_precision,
            tuple(sorted(self.type_coercion_map.keys(), key=str)) if self.type_coercion_map else None,
        ))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InterpolationConfig):
            return NotImplemented
        return (
            self.parameter_styles == other.parameter_styles
            and self.float_precision == other.float_precision
            and self.type_coercion_map == other.type_coercion_map
        )

    def __hash__(self) -> int:
        return self.hash()

    def __repr__(self) -> str:
        styles = sorted(style.value for style in self.parameter_styles)
        return (
            f"InterpolationConfig(parameter_styles={styles!r}, float_precision={self.float_precision}, "
            f"type_coercion_map={list(self.type_coercion_map)!r})"
        )


_DEFAULT_CONFIG: Final = InterpolationConfig()


def get_default_config() -> InterpolationConfig:
    """Return the shared default configuration."""
    return _DEFAULT_CONFIG


def load_config_from_env() -> InterpolationConfig:
    """Load configuration from environment variables.

    Environment Variables Supported:
    - SQLINTERP_PARAMETER_STYLES: Comma-separated styles, e.g. ``qmark,numeric``
    - SQLINTERP_FLOAT_PRECISION: Digits after the decimal point (integer)

    Returns:
        InterpolationConfig loaded from environment variables

    Raises:
        ImproperConfigurationError: If a named parameter style is unknown
    """
    return InterpolationConfig(
        parameter_styles=_env_styles("SQLINTERP_PARAMETER_STYLES", DEFAULT_PARAMETER_STYLES),
        float_precision=_env_int("SQLINTERP_FLOAT_PRECISION", DEFAULT_FLOAT_PRECISION),
    )


def _env_int(key: str, default: int) -> int:
    """Get integer value from environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.debug("Ignoring non-integer %s=%r, using %d", key, value, default)
        return default


def _env_styles(key: str, default: frozenset[ParameterStyle]) -> frozenset[ParameterStyle]:
    """Get a set of parameter styles from a comma-separated environment variable."""
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    styles: set[ParameterStyle] = set()
    for raw in value.split(","):
        name = raw.strip().lower()
        if not name:
            continue
        try:
            styles.add(ParameterStyle(name))
        except ValueError as exc:
            msg = f"Unknown parameter style {name!r} in {key}"
            raise ImproperConfigurationError(msg) from exc
    return frozenset(styles)
