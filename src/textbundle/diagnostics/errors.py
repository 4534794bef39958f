"""TextBundle exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "FormattingError",
    "InvalidTemplateError",
    "MalformedEscapeError",
    "MissingBundleError",
    "MissingKeyError",
    "TextBundleError",
]


class TextBundleError(Exception):
    """Base exception for all TextBundle errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TextBundleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class MalformedEscapeError(TextBundleError):
    """Invalid or incomplete \\u escape while decoding a catalog.

    Aborts decoding of the stream. The loader's caller decides whether to
    skip the candidate or abort.

    Attributes:
        line: Physical line of the escape (1-indexed, 0 if unknown)
        column: Column of the escape's backslash (1-indexed, 0 if unknown)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        super().__init__(message)
        position = self.diagnostic.position if self.diagnostic else None
        self.line = position.line if position else 0
        self.column = position.column if position else 0


class MissingBundleError(TextBundleError):
    """No catalog was found for any candidate locale in any fallback round.

    Attributes:
        base_id: Base resource identifier
        locale: Requested locale tag
    """

    def __init__(self, message: str | Diagnostic, *, base_id: str = "", locale: str = "") -> None:
        super().__init__(message)
        self.base_id = base_id
        self.locale = locale


class MissingKeyError(TextBundleError):
    """Key absent from the whole bundle chain under the RAISE policy.

    Attributes:
        key: The key that was looked up
        locale: Locale tag of the bundle the lookup started from
    """

    def __init__(self, message: str | Diagnostic, *, key: str = "", locale: str = "") -> None:
        super().__init__(message)
        self.key = key
        self.locale = locale


class InvalidTemplateError(TextBundleError):
    """Pattern is not well-formed after escape conversion.

    The underlying catalog value is never corrected automatically.

    Attributes:
        pattern: The converted pattern that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, pattern: str = "") -> None:
        super().__init__(message)
        self.pattern = pattern


class FormattingError(TextBundleError):
    """Raised when an argument cannot be rendered by its placeholder.

    Covers arguments of the wrong type for their format tag (a string passed
    to {0,number}) and failures inside Babel's locale formatting.
    """
