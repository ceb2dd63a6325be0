"""Runtime-checkable protocols for sqlinterp.

This module provides protocols that can be used for static type checking
and runtime isinstance() checks, replacing defensive hasattr() patterns.
"""

from typing import Any, Protocol, runtime_checkable

__all__ = ("ValuerProtocol",)


@runtime_checkable
class ValuerProtocol(Protocol):
    """Protocol for argument types that resolve themselves to a plain value.

    The formatter calls ``sql_value()`` before its own type dispatch and
    formats whatever comes back. Raising from ``sql_value()`` makes the
    argument render as ``NULL``.
    """

    def sql_value(self) -> Any:
        """Return the underlying value to format."""
        ...
