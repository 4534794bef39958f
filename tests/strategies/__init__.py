"""Hypothesis strategies for TextBundle property-based testing.

Strategies are organized by domain:

- catalog: Keys, values and catalogs for the key/value codec
- locale: Locale keys and catalog sets for bundle resolution

Usage:
    from tests.strategies import catalog_keys, catalogs
    from tests.strategies.locale import locale_keys

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - catalog_values, catalogs, locale_keys, catalog_sets
"""

from .catalog import (
    ESCAPE_HEAVY_CHARS,
    catalog_keys,
    catalog_values,
    catalogs,
    doubled_brace_patterns,
)
from .locale import catalog_sets, locale_keys

__all__ = [
    "ESCAPE_HEAVY_CHARS",
    "catalog_keys",
    "catalog_sets",
    "catalog_values",
    "catalogs",
    "doubled_brace_patterns",
    "locale_keys",
]
