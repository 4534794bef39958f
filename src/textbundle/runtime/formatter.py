"""TextFormatter - reusable template formatter bound to one locale.

Python 3.13+.
"""

from __future__ import annotations

from textbundle.locale_utils import normalize_locale

from .message_format import format_message

__all__ = ["TextFormatter"]


class TextFormatter:
    """Formats doubled-brace patterns with positional arguments.

    The only escaping rule for catalog authors is that a literal left brace
    is written twice. Apostrophes never need escaping.

    Example:
        >>> TextFormatter("en_US").format("{{0} is {0}", "zero")
        '{0} is zero'
    """

    __slots__ = ("_locale",)

    def __init__(self, locale: str = "en_US") -> None:
        self._locale = normalize_locale(locale)

    @property
    def locale(self) -> str:
        """Locale code used for number and date arguments."""
        return self._locale

    def format(self, pattern: str, *args: object) -> str:
        """Render pattern with args.

        Raises:
            InvalidTemplateError: If the pattern is malformed
            FormattingError: If an argument cannot be rendered
        """
        return format_message(pattern, args, self._locale)

    def __repr__(self) -> str:
        return f"TextFormatter({self._locale!r})"
