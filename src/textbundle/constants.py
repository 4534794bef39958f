"""Shared constants for TextBundle.

This module provides centralized configuration constants used across
codec, runtime and localization packages. Placing constants here avoids
circular imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Codec
    "LINE_SEPARATOR",
    "UNICODE_ESCAPE_DIGITS",
    "HEADER_TIMESTAMP_FORMAT",
    # Resources
    "DEFAULT_ENCODING",
    "DEFAULT_RESOURCE_SUFFIX",
    # Lookup
    "SENTINEL_MARKER",
    "FALLBACK_DEFAULT_LOCALE",
    # Formatting
    "ROOT_FORMATTING_LOCALE",
    "FALLBACK_FORMATTING_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "PATTERN_CACHE_SIZE",
]

# ============================================================================
# CODEC
# ============================================================================

# Line terminator written by the encoder. The decoder accepts \n, \r and \r\n.
LINE_SEPARATOR: str = "\n"

# A \u escape carries exactly this many hexadecimal digits.
UNICODE_ESCAPE_DIGITS: int = 4

# Header comment timestamp, the shape of the classic Date.toString() output:
# "Sun Oct 18 14:30:00 UTC 2026".
HEADER_TIMESTAMP_FORMAT: str = "%a %b %d %H:%M:%S %Z %Y"

# ============================================================================
# RESOURCES
# ============================================================================

DEFAULT_ENCODING: str = "utf-8"

# Catalog files are named "<base>_<lang>_<COUNTRY>_<variant>.txt".
DEFAULT_RESOURCE_SUFFIX: str = ".txt"

# ============================================================================
# LOOKUP
# ============================================================================

# Missing keys render as ???key??? under the sentinel policy.
SENTINEL_MARKER: str = "???"

# Default locale used when the operating system reports one that cannot be parsed.
FALLBACK_DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# FORMATTING
# ============================================================================

# Babel has no data for the root locale; arguments in ROOT bundles are
# rendered with English conventions.
ROOT_FORMATTING_LOCALE: str = "en"

# Used when a bundle's locale is unknown to Babel.
FALLBACK_FORMATTING_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum parsed templates kept by the pattern cache.
PATTERN_CACHE_SIZE: int = 1024
