"""Key/value text codec.

Converts between a character stream and an ordered Catalog using the
line-oriented "key=value" format with backslash escapes. Unlike classic
.properties files the format is Unicode-capable: non-ASCII text is stored
verbatim, only control characters use \\uXXXX.

Public API:
    Catalog - Ordered, read-only key/value mapping
    load, loads, load_into - Decode from a stream / string / into a mapping
    store, dumps - Encode to a stream / string
    escape_key, escape_value - Field encoders for tools

Python 3.13+. Zero external dependencies.
"""

from .catalog import Catalog
from .lexer import load, load_into, loads
from .writer import dumps, escape_key, escape_value, store

__all__ = [
    "Catalog",
    "dumps",
    "escape_key",
    "escape_value",
    "load",
    "load_into",
    "loads",
    "store",
]
