class NameFormatterError(Exception):
    """Base exception for name formatting failures."""


class InvalidPatternError(NameFormatterError, ValueError):
    """Raised when a format pattern cannot be compiled."""

    def __init__(self, message: str, pattern: str = "", position: int = -1):
        if position >= 0:
            message = f"{message} (at position {position} in {pattern!r})"
        super().__init__(message)
        self.pattern = pattern
        self.position = position


class ConfigurationMissingError(NameFormatterError):
    """Raised when no usable format configuration is available."""


class InvalidSettingError(NameFormatterError, ValueError):
    """Raised when a formatter setting has an unsupported value."""


class InvalidListFormatError(NameFormatterError, ValueError):
    """Raised when a list format entry holds an unsupported value."""
