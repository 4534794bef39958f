"""Template formatting runtime.

Converts the doubled-brace escape convention used in catalogs to the quote
convention of the positional template grammar, then substitutes arguments
with locale-aware rendering of numbers and dates.

Public API:
    convert_escapes - "{{" -> quoted brace, "'" -> "''"
    parse_pattern - Cached parse into literal and Placeholder segments
    format_message - Convert, parse and render in one call
    format_pattern - Render a pattern already in the quote convention
    TextFormatter - Formatter bound to one locale
    LocaleContext - Cached Babel-backed formatting context

Python 3.13+. Babel is needed only for number and date arguments.
"""

from .escapes import convert_escapes
from .formatter import TextFormatter
from .locale_context import LocaleContext
from .message_format import (
    ChoiceBranch,
    Placeholder,
    Segment,
    format_message,
    format_pattern,
    parse_choice,
    parse_pattern,
)

__all__ = [
    "ChoiceBranch",
    "LocaleContext",
    "Placeholder",
    "Segment",
    "TextFormatter",
    "convert_escapes",
    "format_message",
    "format_pattern",
    "parse_choice",
    "parse_pattern",
]
