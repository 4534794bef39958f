"""TextBundle - locale text resources with fallback chains.

Loads key/value catalogs written in a backslash-escaped "key=value" format,
resolves them into per-locale fallback chains (de_DE_PREEURO -> de_DE -> de
-> root), and renders templated values with positional arguments.

Public API:
    resolve_bundle - Resolve a base identifier and locale to a Bundle chain
    Bundle - Catalog plus parent; get() and format()
    LocaleKey - Language/country/variant locale key
    PathCatalogLoader, MemoryCatalogLoader - Catalog sources
    Catalog, load, loads, store, dumps - Key/value codec
    TextFormatter - Doubled-brace template formatter
    BundleConfig - Default locale and missing-key policy

Exceptions:
    TextBundleError - Base exception class
    MalformedEscapeError - Invalid \\u escape in a catalog
    MissingBundleError - No catalog for any candidate locale
    MissingKeyError - Key absent from the whole chain
    InvalidTemplateError - Malformed template
    FormattingError - Argument cannot be rendered

Submodules:
    textbundle.codec - Catalog codec
    textbundle.runtime - Template grammar and LocaleContext
    textbundle.localization - Locale keys, loaders and resolution
    textbundle.substitution - Optional pronoun/suffix substitution
    textbundle.diagnostics - Diagnostics and exceptions
"""

from .codec import Catalog, dumps, load, loads, store
from .config import (
    BundleConfig,
    get_config,
    reset_config,
    set_config,
    set_default_locale,
    set_missing_key_policy,
)
from .diagnostics import (
    FormattingError,
    InvalidTemplateError,
    MalformedEscapeError,
    MissingBundleError,
    MissingKeyError,
    TextBundleError,
)
from .enums import MissingKeyPolicy
from .localization import (
    ROOT,
    Bundle,
    LocaleKey,
    MemoryCatalogLoader,
    PathCatalogLoader,
    resolve_bundle,
)
from .runtime import TextFormatter, format_message

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("textbundle")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__recommended_encoding__ = "UTF-8"

__all__ = [
    "ROOT",
    "Bundle",
    "BundleConfig",
    "Catalog",
    "FormattingError",
    "InvalidTemplateError",
    "LocaleKey",
    "MalformedEscapeError",
    "MemoryCatalogLoader",
    "MissingBundleError",
    "MissingKeyError",
    "MissingKeyPolicy",
    "PathCatalogLoader",
    "TextBundleError",
    "TextFormatter",
    "__recommended_encoding__",
    "__version__",
    "dumps",
    "format_message",
    "get_config",
    "load",
    "loads",
    "reset_config",
    "resolve_bundle",
    "set_config",
    "set_default_locale",
    "set_missing_key_policy",
    "store",
]
