"""Catalog decoder: character stream -> ordered key/value mapping.

Single pass over the stream, one character at a time, no backtracking.

Grammar summary:
    - "#" or "!" as the first non-blank character of a line starts a comment
    - the first unescaped "=" separates key and value; ":" is not special
    - the first run of blanks after a key also separates key and value
    - blanks before a key and right after the separator are skipped
    - "\\n", "\\t", "\\r", "\\f" are control characters, "\\uXXXX" a code point,
      "\\" before a line terminator joins the next physical line (its leading
      blanks are dropped), "\\" before anything else keeps that character
    - line terminators are "\\n", "\\r" and "\\r\\n"

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import io
import logging
from collections.abc import MutableMapping
from enum import Enum, auto
from typing import TextIO

from textbundle.constants import UNICODE_ESCAPE_DIGITS
from textbundle.diagnostics import ErrorTemplate, MalformedEscapeError

from .catalog import Catalog

__all__ = ["load", "load_into", "loads"]

logger = logging.getLogger(__name__)

# Blanks that separate tokens. Newlines are handled as line terminators.
_BLANKS = frozenset(" \t\f")

_CONTROL_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "f": "\f",
}

_HEX_DIGITS = "0123456789abcdefABCDEF"


class _Mode(Enum):
    """Lexer state between two characters."""

    NONE = auto()
    SLASH = auto()  # saw "\", next character is escaped
    UNICODE = auto()  # inside "\uXXXX", collecting digits
    CONTINUE = auto()  # saw "\" + "\r", a "\n" may follow
    KEY_DONE = auto()  # blank run after the key, value not started
    IGNORE = auto()  # skipping blanks at the start of a continued line


class _CatalogLexer:
    """Stateful decoder fed one character at a time.

    Entries are written into the target mapping as each logical line ends.
    Plain dict assignment keeps a redefined key at its first position.
    """

    __slots__ = (
        "_buffer",
        "_column",
        "_count",
        "_escape_at",
        "_first_char",
        "_in_comment",
        "_key_length",
        "_line",
        "_mode",
        "_previous",
        "_target",
        "_unicode",
    )

    def __init__(self, target: MutableMapping[str, str]) -> None:
        self._target = target
        self._buffer: list[str] = []
        self._mode = _Mode.NONE
        self._key_length = -1
        self._first_char = True
        self._in_comment = False
        self._unicode = 0
        self._count = 0
        self._line = 1
        self._column = 0
        self._previous = ""
        self._escape_at = (1, 1)

    def feed(self, char: str) -> None:
        """Consume one character."""
        self._column += 1
        self._consume(char)
        if char == "\r" or (char == "\n" and self._previous != "\r"):
            self._line += 1
            self._column = 0
        elif char == "\n":
            self._column = 0
        self._previous = char

    def finish(self) -> None:
        """Flush the last logical line at end of input.

        Raises:
            MalformedEscapeError: If input ended inside a \\u escape
        """
        if self._mode is _Mode.UNICODE:
            line, column = self._escape_at
            raise MalformedEscapeError(
                ErrorTemplate.incomplete_unicode_escape(self._count, line, column)
            )
        key_length = self._key_length
        if key_length == -1 and self._buffer:
            key_length = len(self._buffer)
        if key_length >= 0:
            text = "".join(self._buffer)
            value = text[key_length:]
            if self._mode is _Mode.SLASH:
                # Dangling backslash: keep a placeholder for the lost character
                value += "\0"
            self._target[text[:key_length]] = value

    def _consume(self, char: str) -> None:  # noqa: PLR0911, PLR0912 - state machine
        if self._in_comment:
            if char in "\r\n":
                self._in_comment = False
            return

        mode = self._mode
        buffer = self._buffer

        if mode is _Mode.UNICODE:
            self._consume_hex_digit(char)
            return

        if mode is _Mode.SLASH:
            self._mode = _Mode.NONE
            match char:
                case "\r":
                    self._mode = _Mode.CONTINUE
                    return
                case "\n":
                    self._mode = _Mode.IGNORE
                    return
                case "u":
                    self._mode = _Mode.UNICODE
                    self._unicode = 0
                    self._count = 0
                    return
                case _:
                    char = _CONTROL_ESCAPES.get(char, char)
        else:
            match char:
                case "#" | "!" if self._first_char:
                    self._in_comment = True
                    return
                case "\n" if mode is _Mode.CONTINUE:
                    # Second half of an escaped "\r\n"
                    self._mode = _Mode.IGNORE
                    return
                case "\n" | "\r":
                    self._end_line()
                    return
                case "\\":
                    if mode is _Mode.KEY_DONE:
                        self._key_length = len(buffer)
                    self._mode = _Mode.SLASH
                    self._escape_at = (self._line, self._column)
                    return
                case "=" if self._key_length == -1:
                    self._mode = _Mode.NONE
                    self._key_length = len(buffer)
                    # "=#x" is an empty key with value "#x", not a comment
                    self._first_char = False
                    return

            if char in _BLANKS:
                if mode is _Mode.CONTINUE:
                    mode = self._mode = _Mode.IGNORE
                offset = len(buffer)
                if offset == 0 or offset == self._key_length or mode is _Mode.IGNORE:
                    return
                if self._key_length == -1:
                    self._mode = _Mode.KEY_DONE
                    return

            if self._mode in (_Mode.IGNORE, _Mode.CONTINUE):
                self._mode = _Mode.NONE

        self._first_char = False
        if self._mode is _Mode.KEY_DONE:
            self._key_length = len(buffer)
            self._mode = _Mode.NONE
        buffer.append(char)

    def _consume_hex_digit(self, char: str) -> None:
        if char not in _HEX_DIGITS:
            line, column = self._escape_at
            raise MalformedEscapeError(
                ErrorTemplate.malformed_unicode_escape(char, line, column)
            )
        self._unicode = (self._unicode << 4) | int(char, 16)
        self._count += 1
        if self._count < UNICODE_ESCAPE_DIGITS:
            return
        self._mode = _Mode.NONE
        # An escaped character is key content, so a later "#" is literal
        self._first_char = False
        self._buffer.append(chr(self._unicode))

    def _end_line(self) -> None:
        """Emit the current logical line, if it holds an entry."""
        self._mode = _Mode.NONE
        self._first_char = True
        buffer = self._buffer
        if buffer or self._key_length == 0:
            key_length = len(buffer) if self._key_length == -1 else self._key_length
            text = "".join(buffer)
            self._target[text[:key_length]] = text[key_length:]
        self._key_length = -1
        buffer.clear()


def load_into[M: MutableMapping[str, str]](target: M, stream: TextIO) -> M:
    """Decode entries from stream into an existing mapping.

    The stream is read with read(1) until it returns "" and is left open.

    Args:
        target: Mapping that receives the entries (existing keys are overwritten)
        stream: Readable text stream

    Returns:
        The target mapping

    Raises:
        MalformedEscapeError: If a \\u escape is invalid or incomplete
        OSError: Passed through from the stream
    """
    lexer = _CatalogLexer(target)
    read = stream.read
    while char := read(1):
        lexer.feed(char)
    lexer.finish()
    return target


def load(stream: TextIO) -> Catalog:
    """Decode a catalog from a readable text stream.

    Args:
        stream: Readable text stream (left open)

    Returns:
        Catalog with entries in definition order

    Raises:
        MalformedEscapeError: If a \\u escape is invalid or incomplete
        OSError: Passed through from the stream

    Example:
        >>> import io
        >>> load(io.StringIO("greeting = Hello\\nfarewell=Bye\\n"))
        Catalog({'greeting': 'Hello', 'farewell': 'Bye'})
    """
    entries = load_into({}, stream)
    logger.debug("Decoded catalog with %d entries", len(entries))
    return Catalog(entries)


def loads(source: str) -> Catalog:
    """Decode a catalog from a string.

    Example:
        >>> loads("k=\\\\u0041")["k"]
        'A'
    """
    return load(io.StringIO(source))
