"""Locale context for thread-safe, bundle-scoped argument formatting.

This module provides locale-aware rendering of template arguments without
global state mutation. Uses Babel for CLDR-compliant number and date
formatting.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Each Bundle formats with the context of its own resolved locale

Style keywords follow the positional template grammar:
    number: "" | "integer" | "percent" | "currency" | <LDML number pattern>
    date, time: "" | "short" | "medium" | "long" | "full" | <LDML date pattern>

Python 3.13+. Requires Babel (imported lazily through core.babel_compat).
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from threading import RLock
from typing import TYPE_CHECKING, ClassVar

from textbundle.constants import FALLBACK_FORMATTING_LOCALE, MAX_LOCALE_CACHE_SIZE
from textbundle.core.babel_compat import (
    get_babel_dates,
    get_babel_numbers,
    get_likely_subtags,
    get_unknown_locale_error,
)
from textbundle.diagnostics import FormattingError
from textbundle.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

_DATE_STYLES = frozenset({"short", "medium", "long", "full"})

type Number = int | float | Decimal


def _candidate_codes(code: str) -> list[str]:
    """Progressively shorter locale codes: de_DE_PREEURO, de_DE, de."""
    parts = code.split("_")
    return ["_".join(parts[:n]) for n in range(len(parts), 0, -1) if parts[n - 1]]


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Use LocaleContext.create() to construct instances. Locales unknown to
    Babel are retried without their variant and then without their
    territory; if nothing matches, en_US is used with a logged warning.

    Examples:
        >>> ctx = LocaleContext.create('en_US')
        >>> ctx.format_number(1234.5)
        '1,234.5'

        >>> ctx = LocaleContext.create('de_DE_PREEURO')
        >>> ctx.babel_locale.territory
        'DE'
        >>> ctx.format_number(1234.5)
        '1.234,5'

    Thread Safety:
        LocaleContext is immutable. The instance cache is protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, LocaleContext]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def create(cls, locale_code: str) -> LocaleContext:
        """Create (or reuse) a LocaleContext for a locale code.

        Args:
            locale_code: Locale code, POSIX or BCP-47 ("en_US", "de-DE")

        Returns:
            Cached LocaleContext; is_fallback is True when en_US was substituted

        Raises:
            BabelImportError: If Babel is not installed
        """
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        unknown_locale_error = get_unknown_locale_error()
        babel_locale: Locale | None = None
        for candidate in _candidate_codes(cache_key):
            try:
                babel_locale = get_babel_locale(candidate)
                break
            except (unknown_locale_error, ValueError):
                continue

        used_fallback = babel_locale is None
        if babel_locale is None:
            logger.warning("Unknown locale '%s'. Falling back to %s", locale_code,
                           FALLBACK_FORMATTING_LOCALE)
            babel_locale = get_babel_locale(FALLBACK_FORMATTING_LOCALE)

        ctx = cls(locale_code=locale_code, babel_locale=babel_locale, is_fallback=used_fallback)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    def format_number(self, value: Number, style: str = "") -> str:
        """Format a number with a template number style.

        Args:
            value: Number to format
            style: "", "integer", "percent", "currency" or an LDML pattern

        Returns:
            Formatted number

        Raises:
            FormattingError: If Babel rejects the value or pattern

        Examples:
            >>> ctx = LocaleContext.create('en_US')
            >>> ctx.format_number(1234.5678)
            '1,234.568'
            >>> ctx.format_number(1234.5, "integer")
            '1,234'
            >>> ctx.format_number(0.25, "percent")
            '25%'
        """
        numbers = get_babel_numbers()
        keyword = style.strip().lower()
        try:
            match keyword:
                case "":
                    return str(numbers.format_decimal(value, locale=self.babel_locale))
                case "integer":
                    return str(
                        numbers.format_decimal(value, format="#,##0", locale=self.babel_locale)
                    )
                case "percent":
                    return str(numbers.format_percent(value, locale=self.babel_locale))
                case "currency":
                    return str(
                        numbers.format_currency(
                            value, self.currency_code(), locale=self.babel_locale
                        )
                    )
                case _:
                    return str(
                        numbers.format_decimal(value, format=style, locale=self.babel_locale)
                    )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            msg = f"Number formatting failed for '{value}' with style '{style}': {e}"
            raise FormattingError(msg) from e

    def format_date(self, value: date, style: str = "") -> str:
        """Format the date part of a date or datetime.

        Args:
            value: date or datetime
            style: "" (medium), "short", "medium", "long", "full" or an LDML pattern

        Raises:
            FormattingError: If Babel rejects the value or pattern
        """
        dates = get_babel_dates()
        keyword = style.strip().lower() or "medium"
        try:
            if keyword in _DATE_STYLES:
                return str(dates.format_date(value, format=keyword, locale=self.babel_locale))
            return self._format_pattern(value, style)
        except (ValueError, TypeError, AttributeError, KeyError) as e:
            msg = f"Date formatting failed for '{value}' with style '{style}': {e}"
            raise FormattingError(msg) from e

    def format_time(self, value: date | time, style: str = "") -> str:
        """Format the time part of a datetime or time.

        A plain date is formatted as midnight.

        Args:
            value: datetime, time or date
            style: "" (medium), "short", "medium", "long", "full" or an LDML pattern

        Raises:
            FormattingError: If Babel rejects the value or pattern
        """
        dates = get_babel_dates()
        keyword = style.strip().lower() or "medium"
        if isinstance(value, date) and not isinstance(value, datetime):
            value = datetime.combine(value, time())
        try:
            if keyword in _DATE_STYLES:
                return str(dates.format_time(value, format=keyword, locale=self.babel_locale))
            return self._format_pattern(value, style)
        except (ValueError, TypeError, AttributeError, KeyError) as e:
            msg = f"Time formatting failed for '{value}' with style '{style}': {e}"
            raise FormattingError(msg) from e

    def format_datetime(self, value: date) -> str:
        """Format an untyped date argument in the locale's short style.

        Datetimes get date and time, plain dates only the date.
        """
        dates = get_babel_dates()
        try:
            if isinstance(value, datetime):
                return str(dates.format_datetime(value, format="short", locale=self.babel_locale))
            return str(dates.format_date(value, format="short", locale=self.babel_locale))
        except (ValueError, TypeError, AttributeError, KeyError) as e:
            msg = f"DateTime formatting failed for '{value}': {e}"
            raise FormattingError(msg) from e

    def _format_pattern(self, value: date | time, pattern: str) -> str:
        dates = get_babel_dates()
        if isinstance(value, time):
            value = datetime.combine(date.today(), value)
        elif not isinstance(value, datetime):
            value = datetime.combine(value, time())
        return str(dates.format_datetime(value, format=pattern, locale=self.babel_locale))

    def currency_code(self) -> str:
        """ISO 4217 code of the locale's current currency.

        Language-only locales use the CLDR likely territory (en -> US).

        Raises:
            FormattingError: If no territory or currency can be determined
        """
        territory = self.babel_locale.territory
        if not territory:
            likely = get_likely_subtags().get(self.babel_locale.language, "")
            parts = [p for p in likely.split("_") if len(p) == 2 and p.isupper()]
            territory = parts[0] if parts else None
        if territory:
            currencies = get_babel_numbers().get_territory_currencies(territory)
            if currencies:
                return str(currencies[0])
        msg = f"No currency known for locale '{self.locale_code}'"
        raise FormattingError(msg)
