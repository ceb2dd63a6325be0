"""Metadata for the sqlinterp project."""

from importlib.metadata import PackageNotFoundError, version

__all__ = ("__project__", "__version__")

try:
    __version__ = version("sqlinterp")
except PackageNotFoundError:
    __version__ = "0.0.0"

__project__ = "sqlinterp"
