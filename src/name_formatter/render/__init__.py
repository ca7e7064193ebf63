from .markup import (
    EscapedText,
    FormattedName,
    Hyperlink,
    MarkupMode,
    PlainText,
    is_markup,
)

__all__ = [
    "EscapedText",
    "FormattedName",
    "Hyperlink",
    "MarkupMode",
    "PlainText",
    "is_markup",
]
