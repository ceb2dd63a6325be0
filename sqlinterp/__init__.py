"""sqlinterp: Interpolate positional arguments into SQL text as literals."""

from sqlinterp import core, exceptions, protocols, utils
from sqlinterp.__metadata__ import __version__
from sqlinterp.core import (
    InterpolationConfig,
    Opaque,
    ParameterStyle,
    PlaceholderInfo,
    PlaceholderScanner,
    SQLArray,
    ValueList,
    escape_string,
    format_argument,
    get_default_config,
    interpolate_query,
    load_config_from_env,
)
from sqlinterp.exceptions import ExtraParameterError, ImproperConfigurationError, ParameterError, SQLInterpError
from sqlinterp.protocols import ValuerProtocol

__all__ = (
    "ExtraParameterError",
    "ImproperConfigurationError",
    "InterpolationConfig",
    "Opaque",
    "ParameterError",
    "ParameterStyle",
    "PlaceholderInfo",
    "PlaceholderScanner",
    "SQLArray",
    "SQLInterpError",
    "ValueList",
    "ValuerProtocol",
    "__version__",
    "core",
    "escape_string",
    "exceptions",
    "format_argument",
    "get_default_config",
    "interpolate_query",
    "load_config_from_env",
    "protocols",
    "utils",
)
