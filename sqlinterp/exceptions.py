from typing import Any

__all__ = (
    "ExtraParameterError",
    "ImproperConfigurationError",
    "ParameterError",
    "SQLInterpError",
)


class SQLInterpError(Exception):
    """Base exception class from which all sqlinterp exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLInterpError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLInterpError):
    """Improper Configuration error.

    Raised when an interpolation configuration holds values the scanner or
    formatter cannot work with.
    """


class ParameterError(SQLInterpError):
    """Base class for parameter-related errors."""

    sql: str | None

    def __init__(self, message: str, sql: str | None = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class ExtraParameterError(ParameterError):
    """Raised when more arguments are supplied than placeholders were filled.

    Attributes:
        expected: Number of placeholders that received an argument.
        actual: Number of arguments supplied.
    """

    expected: int
    actual: int

    def __init__(self, expected: int, actual: int, sql: str | None = None) -> None:
        super().__init__(f"too many arguments provided: expected {expected}, got {actual}", sql)
        self.expected = expected
        self.actual = actual
