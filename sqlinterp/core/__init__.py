"""sqlinterp core: placeholder scanning and literal formatting.

Architecture Overview:
- config.py: ParameterStyle enum and InterpolationConfig
- values.py: Explicit value variants (SQLArray, ValueList, Opaque)
- formatting.py: Value-to-literal formatting
- parameters.py: PlaceholderScanner and interpolate_query
"""

from sqlinterp.core.config import InterpolationConfig, ParameterStyle, get_default_config, load_config_from_env
from sqlinterp.core.formatting import (
    escape_string,
    format_argument,
    format_array,
    format_bytes,
    format_timestamp,
    format_value_list,
)
from sqlinterp.core.parameters import PlaceholderInfo, PlaceholderScanner, interpolate_query
from sqlinterp.core.values import Opaque, SQLArray, ValueList

__all__ = (
    "InterpolationConfig",
    "Opaque",
    "ParameterStyle",
    "PlaceholderInfo",
    "PlaceholderScanner",
    "SQLArray",
    "ValueList",
    "escape_string",
    "format_argument",
    "format_array",
    "format_bytes",
    "format_timestamp",
    "format_value_list",
    "get_default_config",
    "interpolate_query",
    "load_config_from_env",
)
