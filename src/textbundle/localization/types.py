"""Type aliases for the localization domain.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "BaseId",
    "CatalogSource",
    "LocaleTag",
    "MessageKey",
]

type BaseId = str
"""Base resource identifier, e.g. 'messages' or 'ui/menus'."""

type LocaleTag = str
"""Locale tag in POSIX or BCP-47 form (e.g., 'en', 'en_US', 'de-DE', 'fr__X')."""

type MessageKey = str
"""Catalog key (e.g., 'greeting', 'menu.quit')."""

type CatalogSource = str
"""Raw catalog text in the key/value codec format."""
