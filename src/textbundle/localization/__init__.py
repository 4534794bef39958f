"""Hierarchical resource resolution.

Resolves a base identifier and a locale to a chain of catalogs, from the
most specific locale that has one down to ROOT, and answers lookups by
walking that chain.

Public API:
    LocaleKey, ROOT, derive_candidates - Locale keys and fallback candidates
    CatalogLoader, PathCatalogLoader, MemoryCatalogLoader, resource_name - Loading
    Bundle - Catalog plus parent link; get() and format()
    build_chain, resolve_bundle - Chain construction and resolution

Example:
    >>> loader = MemoryCatalogLoader({
    ...     "app.txt": "title=App\\nitems=You have {0} items",
    ...     "app_de.txt": "title=Anwendung",
    ... })
    >>> bundle = resolve_bundle("app", "de_AT", loader)
    >>> bundle.get("title"), bundle.format("items", "no")
    ('Anwendung', 'You have no items')

Python 3.13+.
"""

from .bundle import Bundle
from .loading import CatalogLoader, MemoryCatalogLoader, PathCatalogLoader, resource_name
from .locale_key import ROOT, LocaleKey, derive_candidates
from .resolver import build_chain, resolve_bundle
from .types import BaseId, CatalogSource, LocaleTag, MessageKey

__all__ = [
    "ROOT",
    "BaseId",
    "Bundle",
    "CatalogLoader",
    "CatalogSource",
    "LocaleKey",
    "LocaleTag",
    "MemoryCatalogLoader",
    "MessageKey",
    "PathCatalogLoader",
    "build_chain",
    "derive_candidates",
    "resolve_bundle",
    "resource_name",
]
