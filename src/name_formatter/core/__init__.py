from .exceptions import (
    ConfigurationMissingError,
    InvalidListFormatError,
    InvalidPatternError,
    InvalidSettingError,
    NameFormatterError,
)

__all__ = [
    "ConfigurationMissingError",
    "InvalidListFormatError",
    "InvalidPatternError",
    "InvalidSettingError",
    "NameFormatterError",
]
