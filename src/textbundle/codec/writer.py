"""Catalog encoder: ordered key/value mapping -> character stream.

Output is the exact inverse of the decoder in lexer.py:
    - keys escape every space, values only a leading one
    - "\\", "=", newline, carriage return, tab and form feed are escaped
    - "#" and "!" are escaped only as the first character of a key
    - other characters below U+0020 become "\\u" + four upper-case hex digits
    - everything else, including non-ASCII text, is written verbatim

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import io
from collections.abc import Mapping
from datetime import datetime
from typing import TextIO

from textbundle.constants import HEADER_TIMESTAMP_FORMAT, LINE_SEPARATOR

__all__ = ["dumps", "escape_key", "escape_value", "store"]

_CONTROL_ESCAPES: dict[str, str] = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\f": "\\f",
}


def _escape(text: str, *, is_key: bool) -> str:
    output: list[str] = []
    for i, char in enumerate(text):
        code = ord(char)
        # Common case first: nothing between ">" and "~" needs escaping but "\"
        if 61 < code <= 126:
            output.append("\\\\" if char == "\\" else char)
            continue
        match char:
            case " ":
                output.append("\\ " if i == 0 or is_key else " ")
            case "\n" | "\r" | "\t" | "\f":
                output.append(_CONTROL_ESCAPES[char])
            case "#" | "!":
                output.append(f"\\{char}" if i == 0 and is_key else char)
            case "=":
                output.append("\\=")
            case _ if code < 32:
                output.append(f"\\u{code:04X}")
            case _:
                output.append(char)
    return "".join(output)


def escape_key(key: str) -> str:
    """Escape a key for output.

    Example:
        >>> escape_key("#main title")
        '\\\\#main\\\\ title'
    """
    return _escape(key, is_key=True)


def escape_value(value: str) -> str:
    """Escape a value for output.

    Example:
        >>> escape_value("  a = b")
        '\\\\  a \\\\= b'
    """
    return _escape(value, is_key=False)


def _write_comment(stream: TextIO, comment: str) -> None:
    """Write comment as "#"-prefixed lines.

    Lines that already start with "#" or "!" keep their own marker.
    """
    stream.write("#")
    length = len(comment)
    last = 0
    current = 0
    while current < length:
        char = comment[current]
        if char in "\r\n":
            if last != current:
                stream.write(comment[last:current])
            stream.write(LINE_SEPARATOR)
            if char == "\r" and current != length - 1 and comment[current + 1] == "\n":
                current += 1
            if current == length - 1 or comment[current + 1] not in "#!":
                stream.write("#")
            last = current + 1
        current += 1
    if last != current:
        stream.write(comment[last:current])
    stream.write(LINE_SEPARATOR)


def store(
    catalog: Mapping[str, str],
    stream: TextIO,
    comment: str | None = None,
    *,
    timestamp: datetime | None = None,
) -> None:
    """Write a catalog to a writable text stream.

    Writes the optional comment, a "#"-prefixed timestamp header, then one
    "key=value" line per entry in the mapping's iteration order. The stream is
    flushed and left open.

    Args:
        catalog: Mapping to encode (a Catalog or any str -> str mapping)
        stream: Writable text stream
        comment: Optional comment, may span several lines
        timestamp: Header time (default: now, local time zone)

    Raises:
        OSError: Passed through from the stream
    """
    if comment is not None:
        _write_comment(stream, comment)
    when = timestamp if timestamp is not None else datetime.now().astimezone()
    stream.write("#")
    stream.write(when.strftime(HEADER_TIMESTAMP_FORMAT))
    stream.write(LINE_SEPARATOR)

    for key, value in catalog.items():
        stream.write(f"{escape_key(key)}={escape_value(value)}{LINE_SEPARATOR}")
    stream.flush()


def dumps(
    catalog: Mapping[str, str],
    comment: str | None = None,
    *,
    timestamp: datetime | None = None,
) -> str:
    """Encode a catalog to a string.

    Example:
        >>> from datetime import datetime, UTC
        >>> dumps({"a b": " x"}, timestamp=datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC))
        '#Fri Jan 02 03:04:05 UTC 2026\\na\\\\ b=\\\\ x\\n'
    """
    buffer = io.StringIO()
    store(catalog, buffer, comment, timestamp=timestamp)
    return buffer.getvalue()
