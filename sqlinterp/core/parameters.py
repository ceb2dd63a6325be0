"""Placeholder scanning and positional interpolation.

Components:
- PlaceholderInfo: Tracks placeholder metadata
- PlaceholderScanner: Locates placeholders and substitutes formatted literals
- interpolate_query: Convenience entry point using a cached scanner per config

Scanning is purely lexical. ``?`` and ``$N`` tokens are matched wherever they
occur, including inside string literals and comments of the query itself.
Both styles are positional: arguments are consumed in order of appearance and
the number in ``$N`` is not used to pick an argument.
"""

import logging
import re
from collections.abc import Sequence
from functools import lru_cache
from typing import Any, Final

from mypy_extensions import mypyc_attr

from sqlinterp.core.config import InterpolationConfig, ParameterStyle, get_default_config
from sqlinterp.core.formatting import format_argument
from sqlinterp.exceptions import ExtraParameterError
from sqlinterp.utils.logging import get_logger, log_with_context
from sqlinterp.utils.type_guards import is_iterable_parameters

__all__ = (
    "ParameterStyle",
    "PlaceholderInfo",
    "PlaceholderScanner",
    "interpolate_query",
)

logger = get_logger("sqlinterp.core.parameters")

_STYLE_PATTERNS: Final = {
    ParameterStyle.NUMERIC: r"(?P<numeric>\$(?P<numeric_num>\d+))",
    ParameterStyle.QMARK: r"(?P<qmark>\?)",
}
_STYLE_ORDER: Final = (ParameterStyle.NUMERIC, ParameterStyle.QMARK)


@lru_cache(maxsize=8)
def _placeholder_regex(styles: "frozenset[ParameterStyle]") -> "re.Pattern[str]":
    """Compile the alternation matching every enabled placeholder style."""
    return re.compile("|".join(_STYLE_PATTERNS[style] for style in _STYLE_ORDER if style in styles))


@mypyc_attr(allow_interpreted_subclasses=False)
class PlaceholderInfo:
    """Information about a detected placeholder in SQL.

    Attributes:
        name: Digits of a ``$N`` token (None for ``?``)
        style: Parameter style
        position: Character position in SQL string
        ordinal: Order of appearance (0-indexed)
        placeholder_text: Original text in SQL
    """

    __slots__ = ("name", "ordinal", "placeholder_text", "position", "style")

    def __init__(
        self, name: str | None, style: ParameterStyle, position: int, ordinal: int, placeholder_text: str
    ) -> None:
        self.name = name
        self.style = style
        self.position = position
        self.ordinal = ordinal
        self.placeholder_text = placeholder_text

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"PlaceholderInfo(name={self.name!r}, style={self.style!r}, "
            f"position={self.position}, ordinal={self.ordinal}, "
            f"placeholder_text={self.placeholder_text!r})"
        )


@mypyc_attr(allow_interpreted_subclasses=False)
class PlaceholderScanner:
    """Placeholder extraction and positional interpolation.

    Scanners hold no per-call state and may be shared between threads.
    """

    __slots__ = ("_config", "_pattern")

    def __init__(self, config: InterpolationConfig | None = None) -> None:
        """Initialize scanner.

        Args:
            config: Interpolation configuration (defaults to the shared default)
        """
        self._config = config if config is not None else get_default_config()
        self._pattern = _placeholder_regex(self._config.parameter_styles)

    @property
    def config(self) -> InterpolationConfig:
        return self._config

    def _extract_parameter_style(self, match: "re.Match[str]") -> "tuple[ParameterStyle, str | None]":
        """Extract parameter style and name from regex match."""
        groups = match.groupdict()
        if groups.get("numeric"):
            return ParameterStyle.NUMERIC, groups["numeric_num"]
        return ParameterStyle.QMARK, None

    def extract_placeholders(self, sql: str) -> "list[PlaceholderInfo]":
        """Extract all placeholders from SQL.

        Args:
            sql: SQL string to analyze

        Returns:
            List of PlaceholderInfo objects in order of appearance
        """
        placeholders: list[PlaceholderInfo] = []
        for ordinal, match in enumerate(self._pattern.finditer(sql)):
            style, name = self._extract_parameter_style(match)
            placeholders.append(PlaceholderInfo(name, style, match.start(), ordinal, match.group()))
        return placeholders

    def count_placeholders(self, sql: str) -> int:
        """Count placeholder occurrences in SQL."""
        return sum(1 for _ in self._pattern.finditer(sql))

    def interpolate(self, sql: str, parameters: "Sequence[Any]") -> str:
        """Replace placeholders with formatted literals, left to right.

        Placeholders beyond the supplied arguments are left as written.

        Args:
            sql: SQL text with placeholders
            parameters: Argument values, consumed in order

        Raises:
            TypeError: If parameters is not a sequence of values
            ExtraParameterError: If more arguments were supplied than placeholders found

        Returns:
            Interpolated SQL text
        """
        if not is_iterable_parameters(parameters):
            msg = f"parameters must be a sequence of values, got {type(parameters).__name__}"
            raise TypeError(msg)

        supplied = len(parameters)
        if supplied == 0:
            logger.debug("No arguments supplied, returning query unchanged")
            return sql

        pieces: list[str] = []
        consumed = 0
        unfilled = 0
        last_end = 0
        for match in self._pattern.finditer(sql):
            if consumed >= supplied:
                unfilled += 1
                continue
            pieces.append(sql[last_end : match.start()])
            pieces.append(format_argument(parameters[consumed], self._config))
            consumed += 1
            last_end = match.end()
        pieces.append(sql[last_end:])

        if consumed < supplied:
            log_with_context(
                logger, logging.DEBUG, "Too many arguments for query", expected=consumed, actual=supplied
            )
            raise ExtraParameterError(consumed, supplied, sql)

        if unfilled:
            log_with_context(
                logger,
                logging.DEBUG,
                "Arguments exhausted, placeholders left unfilled",
                supplied=supplied,
                unfilled=unfilled,
            )
        return "".join(pieces)


@lru_cache(maxsize=32)
def _get_scanner(config: InterpolationConfig) -> PlaceholderScanner:
    return PlaceholderScanner(config)


def interpolate_query(sql: str, *args: Any, config: InterpolationConfig | None = None) -> str:
    """Interpolate positional arguments into SQL as literals.

    Example:
        >>> interpolate_query("SELECT * FROM t WHERE id = $1 AND name = $2", 123, "John")
        "SELECT * FROM t WHERE id = 123 AND name = 'John'"

    Args:
        sql: SQL text with ``?`` or ``$N`` placeholders
        *args: Argument values, consumed in order
        config: Interpolation configuration (defaults to the shared default)

    Raises:
        ExtraParameterError: If more arguments were supplied than placeholders found

    Returns:
        Interpolated SQL text
    """
    return _get_scanner(config if config is not None else get_default_config()).interpolate(sql, args)
