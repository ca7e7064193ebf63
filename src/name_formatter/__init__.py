"""name_formatter - pattern-driven formatting of structured human names."""

from .config import NameConfig, get_config, load_config
from .core.exceptions import (
    ConfigurationMissingError,
    InvalidListFormatError,
    InvalidPatternError,
    InvalidSettingError,
    NameFormatterError,
)
from .entities import Conjunction, DelimiterBehavior, ListFormatSpec, NameComponents
from .formatter import NameFormatter, format_list, format_name
from .parser import FormatPattern, compile_pattern
from .render import EscapedText, Hyperlink, MarkupMode, PlainText

__version__ = "0.1.0"

__all__ = [
    "ConfigurationMissingError",
    "Conjunction",
    "DelimiterBehavior",
    "EscapedText",
    "FormatPattern",
    "Hyperlink",
    "InvalidListFormatError",
    "InvalidPatternError",
    "InvalidSettingError",
    "ListFormatSpec",
    "MarkupMode",
    "NameComponents",
    "NameConfig",
    "NameFormatter",
    "NameFormatterError",
    "compile_pattern",
    "format_list",
    "format_name",
    "get_config",
    "load_config",
]
