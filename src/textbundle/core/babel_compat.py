"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across all Babel-dependent modules.

Design Rationale:
    TextBundle supports two installation modes:
    - Core: `pip install textbundle` (codec, resolver, string-only formatting)
    - Full: `pip install textbundle[babel]` (locale-aware number/date rendering)

    This module ensures that:
    1. Core installations never trigger Babel imports
    2. Formatting code gets a consistent, helpful error when Babel is missing
    3. Babel types are available for TYPE_CHECKING without runtime import

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from types import ModuleType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType

__all__ = [
    "BabelImportError",
    "get_babel_dates",
    "get_babel_numbers",
    "get_likely_subtags",
    "get_locale_class",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install textbundle[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class."""
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class."""
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_numbers() -> ModuleType:
    """Get the babel.numbers module."""
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers


def get_babel_dates() -> ModuleType:
    """Get the babel.dates module."""
    require_babel("get_babel_dates")
    from babel import dates  # noqa: PLC0415

    return dates


def get_likely_subtags() -> dict[str, str]:
    """Get CLDR likely-subtags data ("en" -> "en_Latn_US").

    Used to find a territory (and so a currency) for language-only locales.
    """
    require_babel("get_likely_subtags")
    from babel.core import get_global  # noqa: PLC0415

    return dict(get_global("likely_subtags"))
