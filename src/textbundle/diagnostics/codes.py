"""Diagnostic codes and data structures.

Defines error codes, source positions, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourcePosition",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing bundles, missing keys)
        2000-2999: Formatting errors (template grammar, argument rendering)
        3000-3999: Codec errors (catalog decoding)
        4000-4999: Locale errors
    """

    # Lookup errors (1000-1999)
    BUNDLE_NOT_FOUND = 1001
    KEY_NOT_FOUND = 1002

    # Formatting errors (2000-2999)
    TEMPLATE_UNMATCHED_BRACE = 2001
    TEMPLATE_BAD_ARGUMENT_INDEX = 2002
    TEMPLATE_UNKNOWN_FORMAT_TYPE = 2003
    TEMPLATE_BAD_CHOICE = 2004
    ARGUMENT_TYPE_MISMATCH = 2005
    FORMATTING_FAILED = 2006

    # Codec errors (3000-3999)
    MALFORMED_UNICODE_ESCAPE = 3001
    INCOMPLETE_UNICODE_ESCAPE = 3002

    # Locale errors (4000-4999)
    INVALID_LOCALE_KEY = 4001


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """Location inside a decoded character stream.

    Attributes:
        line: Physical line number (1-indexed)
        column: Column number (1-indexed)
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourcePosition invariants.

        Raises:
            ValueError: If line or column is less than 1
        """
        if self.line < 1:
            msg = f"SourcePosition.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourcePosition.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        position: Source location (codec errors only)
        hint: Suggestion for fixing the error
        resource: Resource description (path or base id) where the error arose
        argument_index: Template argument index involved (formatting errors)
        expected_type: Expected argument type (formatting errors)
        received_type: Actual argument type received (formatting errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    position: SourcePosition | None = None
    hint: str | None = None
    resource: str | None = None
    argument_index: int | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[KEY_NOT_FOUND]: Key 'title' not found in bundle 'en_US'
              = help: Add the key to the base catalog or one of its locale variants

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
