"""Diagnostic system for TextBundle errors.

Provides structured error diagnostics with codes, positions, and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourcePosition
from .errors import (
    FormattingError,
    InvalidTemplateError,
    MalformedEscapeError,
    MissingBundleError,
    MissingKeyError,
    TextBundleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormattingError",
    "InvalidTemplateError",
    "MalformedEscapeError",
    "MissingBundleError",
    "MissingKeyError",
    "OutputFormat",
    "SourcePosition",
    "TextBundleError",
]
