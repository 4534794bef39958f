"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourcePosition

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are built here so exception constructors never format
    their own messages.
    """

    @staticmethod
    def bundle_not_found(base_id: str, locale: str) -> Diagnostic:
        """No catalog exists for any candidate locale.

        Args:
            base_id: Base resource identifier that was requested
            locale: Requested locale (as a tag)

        Returns:
            Diagnostic for BUNDLE_NOT_FOUND
        """
        msg = f"Can't find bundle for base id '{base_id}', locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.BUNDLE_NOT_FOUND,
            message=msg,
            hint="Provide at least the base catalog (no locale suffix)",
            resource=base_id,
        )

    @staticmethod
    def key_not_found(key: str, locale: str) -> Diagnostic:
        """Key absent from every catalog of a bundle chain.

        Args:
            key: The key that was looked up
            locale: Locale tag of the bundle the lookup started from

        Returns:
            Diagnostic for KEY_NOT_FOUND
        """
        msg = f"Key '{key}' not found in bundle '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=msg,
            hint="Add the key to the base catalog or one of its locale variants",
        )

    @staticmethod
    def malformed_unicode_escape(char: str, line: int, column: int) -> Diagnostic:
        """A \\u escape contains a non-hexadecimal character."""
        msg = f"Invalid Unicode sequence: illegal character {char!r}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_UNICODE_ESCAPE,
            message=msg,
            position=SourcePosition(line, column),
            hint="A \\u escape must be followed by exactly four hexadecimal digits",
        )

    @staticmethod
    def incomplete_unicode_escape(digits: int, line: int, column: int) -> Diagnostic:
        """Input ended before a \\u escape collected four digits."""
        msg = (
            "Invalid Unicode sequence: expected format \\uxxxx, "
            f"input ended after {digits} digit(s)"
        )
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_UNICODE_ESCAPE,
            message=msg,
            position=SourcePosition(line, column),
            hint="A \\u escape must be followed by exactly four hexadecimal digits",
        )

    @staticmethod
    def unmatched_brace(pattern: str) -> Diagnostic:
        """Placeholder opened with { but never closed."""
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_UNMATCHED_BRACE,
            message=f"Unmatched braces in the pattern: {pattern!r}",
            hint="Double a left brace ({{) to write it literally",
        )

    @staticmethod
    def bad_argument_index(text: str, pattern: str) -> Diagnostic:
        """Placeholder argument index is not a non-negative integer."""
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_BAD_ARGUMENT_INDEX,
            message=f"Can't parse argument number {text!r} in pattern {pattern!r}",
            hint="Placeholders are numbered from zero: {0}, {1}, ...",
        )

    @staticmethod
    def unknown_format_type(type_tag: str, pattern: str) -> Diagnostic:
        """Placeholder names a format type the template grammar does not know."""
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_UNKNOWN_FORMAT_TYPE,
            message=f"Unknown format type {type_tag!r} in pattern {pattern!r}",
            hint="Supported types: number, date, time, choice",
        )

    @staticmethod
    def bad_choice(style: str) -> Diagnostic:
        """Choice style could not be parsed into limits and branches."""
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_BAD_CHOICE,
            message=f"Invalid choice format {style!r}",
            hint="Use limit#text|limit<text, e.g. 0#none|1#one|1<many",
        )

    @staticmethod
    def argument_type_mismatch(
        index: int, expected: str, received: str
    ) -> Diagnostic:
        """Argument cannot be rendered by its placeholder's format type."""
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_TYPE_MISMATCH,
            message=f"Cannot format argument {{{index}}} as {expected}",
            argument_index=index,
            expected_type=expected,
            received_type=received,
        )

    @staticmethod
    def formatting_failed(index: int, reason: str) -> Diagnostic:
        """Locale-aware formatting of an argument raised."""
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=f"Formatting argument {{{index}}} failed: {reason}",
            argument_index=index,
        )

    @staticmethod
    def invalid_locale_key(text: str, reason: str) -> Diagnostic:
        """Locale tag cannot be split into locale key components."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE_KEY,
            message=f"Invalid locale {text!r}: {reason}",
            hint="Use language[_COUNTRY[_variant]], e.g. en, en_US, de_DE_PREEURO",
        )
