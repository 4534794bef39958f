"""Positional template grammar: parsing and rendering.

Patterns use the quote convention (see escapes.convert_escapes):
    ''                  literal apostrophe
    'text'              quoted literal, braces inside are not special
    {index}             argument at index, rendered by its Python type
    {index,type}        type is number, date, time or choice
    {index,type,style}  style refines the type (keyword or LDML pattern)

A "}" outside a placeholder is literal text.

Parsing is pure and cached; rendering needs Babel only for number and date
arguments, so string-only templates work without it.

Python 3.13+.
"""

from __future__ import annotations

import functools
import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal

from textbundle.constants import PATTERN_CACHE_SIZE
from textbundle.diagnostics import ErrorTemplate, FormattingError, InvalidTemplateError
from textbundle.enums import FormatType

from .escapes import convert_escapes
from .locale_context import LocaleContext

__all__ = [
    "ChoiceBranch",
    "Placeholder",
    "Segment",
    "format_message",
    "format_pattern",
    "parse_choice",
    "parse_pattern",
]

_FORMAT_TYPES: dict[str, FormatType] = {t.value: t for t in FormatType}

# Choice limit separators: "#" (at least), "<" (strictly above), "≤" (same as "#")
_CHOICE_SEPARATORS = "#<≤"


@dataclass(frozen=True, slots=True)
class ChoiceBranch:
    """One "limit#text" interval of a choice style."""

    limit: float
    text: str


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Parsed {index,type,style} placeholder."""

    index: int
    format_type: FormatType = FormatType.NONE
    style: str = ""
    choices: tuple[ChoiceBranch, ...] = ()


type Segment = str | Placeholder


def _parse_limit(text: str, style: str) -> float:
    match text.strip():
        case "∞":
            return math.inf
        case "-∞":
            return -math.inf
        case stripped:
            try:
                return float(stripped)
            except ValueError:
                raise InvalidTemplateError(ErrorTemplate.bad_choice(style), pattern=style) from None


def parse_choice(style: str) -> tuple[ChoiceBranch, ...]:
    """Parse a choice style into ascending branches.

    Args:
        style: "limit#text|limit<text|..."; quote "#", "<" and "|" inside text

    Returns:
        Branches in ascending limit order

    Raises:
        InvalidTemplateError: If a branch lacks a limit, limits are not
            ascending, or there are no branches

    Example:
        >>> [b.text for b in parse_choice("0#none|1#one|1<many")]
        ['none', 'one', 'many']
    """
    branches: list[ChoiceBranch] = []
    limit_text: list[str] = []
    branch_text: list[str] = []
    in_text = False
    in_quote = False
    limit = -math.inf
    previous = math.nan
    length = len(style)
    i = 0
    while i < length:
        char = style[i]
        if char == "'":
            if i + 1 < length and style[i + 1] == "'":
                (branch_text if in_text else limit_text).append(char)
                i += 1
            else:
                in_quote = not in_quote
        elif in_quote:
            (branch_text if in_text else limit_text).append(char)
        elif char in _CHOICE_SEPARATORS:
            if not limit_text:
                raise InvalidTemplateError(ErrorTemplate.bad_choice(style), pattern=style)
            limit = _parse_limit("".join(limit_text), style)
            if char == "<" and not math.isinf(limit):
                limit = math.nextafter(limit, math.inf)
            if not math.isnan(previous) and limit <= previous:
                raise InvalidTemplateError(ErrorTemplate.bad_choice(style), pattern=style)
            limit_text.clear()
            in_text = True
        elif char == "|":
            branches.append(ChoiceBranch(limit, "".join(branch_text)))
            previous = limit
            branch_text.clear()
            in_text = False
        else:
            (branch_text if in_text else limit_text).append(char)
        i += 1

    if in_text:
        branches.append(ChoiceBranch(limit, "".join(branch_text)))
    if not branches:
        raise InvalidTemplateError(ErrorTemplate.bad_choice(style), pattern=style)
    return tuple(branches)


def _make_placeholder(parts: list[list[str]], pattern: str) -> Placeholder:
    index_text = "".join(parts[0]).strip()
    if not index_text.isascii() or not index_text.isdigit():
        raise InvalidTemplateError(
            ErrorTemplate.bad_argument_index(index_text, pattern), pattern=pattern
        )
    type_tag = "".join(parts[1]).strip().lower()
    format_type = _FORMAT_TYPES.get(type_tag)
    if format_type is None:
        raise InvalidTemplateError(
            ErrorTemplate.unknown_format_type(type_tag, pattern), pattern=pattern
        )
    style = "".join(parts[2])
    if format_type is FormatType.CHOICE:
        return Placeholder(int(index_text), format_type, style, parse_choice(style))
    return Placeholder(int(index_text), format_type, style)


@functools.lru_cache(maxsize=PATTERN_CACHE_SIZE)
def parse_pattern(pattern: str) -> tuple[Segment, ...]:
    """Parse a quote-convention pattern into literal and placeholder segments.

    Args:
        pattern: Pattern after escape conversion

    Returns:
        Segments in order; adjacent literal text is merged

    Raises:
        InvalidTemplateError: On an unmatched "{", a bad argument index or an
            unknown format type

    Example:
        >>> parse_pattern("Hi '{'{0}'}'")
        ('Hi {', Placeholder(index=0, format_type=<FormatType.NONE: ''>, style='', choices=()), '}')
    """
    segments: list[Segment] = []
    literal: list[str] = []
    parts: list[list[str]] = [[], [], []]
    part = -1  # -1: literal text, 0: index, 1: type, 2: style
    in_quote = False
    depth = 0
    length = len(pattern)
    i = 0
    while i < length:
        char = pattern[i]
        if part == -1:
            if char == "'":
                if i + 1 < length and pattern[i + 1] == "'":
                    literal.append(char)
                    i += 1
                else:
                    in_quote = not in_quote
            elif char == "{" and not in_quote:
                if literal:
                    segments.append("".join(literal))
                    literal.clear()
                part = 0
                parts = [[], [], []]
            else:
                literal.append(char)
        elif in_quote:
            # Quotes stay in the style so a choice style can use them
            parts[part].append(char)
            if char == "'":
                in_quote = False
        else:
            match char:
                case "," if part < 2:
                    part += 1
                case "{":
                    depth += 1
                    parts[part].append(char)
                case "}" if depth == 0:
                    segments.append(_make_placeholder(parts, pattern))
                    part = -1
                case "}":
                    depth -= 1
                    parts[part].append(char)
                case " " if part == 1 and not parts[1]:
                    pass
                case "'":
                    in_quote = True
                    parts[part].append(char)
                case _:
                    parts[part].append(char)
        i += 1

    if part != -1:
        raise InvalidTemplateError(ErrorTemplate.unmatched_brace(pattern), pattern=pattern)
    if literal:
        segments.append("".join(literal))
    return tuple(segments)


def _is_number(value: object) -> bool:
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def _type_mismatch(index: int, expected: str, value: object) -> FormattingError:
    return FormattingError(
        ErrorTemplate.argument_type_mismatch(index, expected, type(value).__name__)
    )


def _select_choice(choices: tuple[ChoiceBranch, ...], value: float) -> str:
    selected = 0
    for position, branch in enumerate(choices):
        # NaN compares false and keeps the first branch
        if not value >= branch.limit:
            break
        selected = position
    return choices[selected].text


def _render_placeholder(placeholder: Placeholder, args: Sequence[object], locale: str) -> str:
    index = placeholder.index
    if index >= len(args):
        return f"{{{index}}}"
    value = args[index]
    if value is None:
        return str(value)

    match placeholder.format_type:
        case FormatType.NONE:
            if _is_number(value):
                return LocaleContext.create(locale).format_number(value)  # type: ignore[arg-type]
            if isinstance(value, date):
                return LocaleContext.create(locale).format_datetime(value)
            return str(value)
        case FormatType.NUMBER:
            if not _is_number(value):
                raise _type_mismatch(index, "number", value)
            return LocaleContext.create(locale).format_number(
                value, placeholder.style  # type: ignore[arg-type]
            )
        case FormatType.DATE:
            if not isinstance(value, date):
                raise _type_mismatch(index, "date", value)
            return LocaleContext.create(locale).format_date(value, placeholder.style)
        case FormatType.TIME:
            if not isinstance(value, date | time):
                raise _type_mismatch(index, "time", value)
            return LocaleContext.create(locale).format_time(value, placeholder.style)
        case FormatType.CHOICE:
            if not _is_number(value):
                raise _type_mismatch(index, "choice", value)
            text = _select_choice(placeholder.choices, float(value))  # type: ignore[arg-type]
            if "{" in text:
                return format_pattern(text, args, locale)
            return text


def format_pattern(pattern: str, args: Sequence[object], locale: str = "en_US") -> str:
    """Render a pattern that already uses the quote convention.

    Args:
        pattern: Quote-convention pattern
        args: Positional arguments
        locale: Locale code used for number and date arguments

    Raises:
        InvalidTemplateError: If the pattern is malformed
        FormattingError: If an argument cannot be rendered by its placeholder
    """
    if "{" not in pattern and "'" not in pattern:
        return pattern
    output: list[str] = []
    for segment in parse_pattern(pattern):
        if isinstance(segment, str):
            output.append(segment)
        else:
            output.append(_render_placeholder(segment, args, locale))
    return "".join(output)


def format_message(pattern: str, args: Sequence[object] = (), locale: str = "en_US") -> str:
    """Convert doubled-brace escapes, then substitute positional arguments.

    Placeholders whose index has no argument are kept as "{index}".

    Args:
        pattern: Pattern in the doubled-brace convention ("{{" is a literal brace)
        args: Positional arguments
        locale: Locale code used for number and date arguments

    Returns:
        Rendered text

    Raises:
        InvalidTemplateError: If the converted pattern is malformed
        FormattingError: If an argument cannot be rendered by its placeholder
        BabelImportError: If a number or date argument needs Babel and it is missing

    Examples:
        >>> format_message("It's {0}!", ["here"])
        "It's here!"
        >>> format_message("{{literal} {0}", ["x"])
        '{literal} x'
        >>> format_message("{1} and {0}", ["a"])
        '{1} and a'
    """
    return format_pattern(convert_escapes(pattern), args, locale)
