"""Core utilities shared across codec, runtime and localization layers.

Exports:
    BabelImportError: Raised when Babel-backed formatting is used without Babel
    is_babel_available: Check for the optional Babel dependency
    require_babel: Fail fast when Babel is required

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
