"""Doubled-brace escape convention -> quote convention.

Catalog authors write a literal left brace as "{{" and never escape
apostrophes. The positional template grammar uses apostrophes for quoting,
so every "'" is doubled and each pair of left braces becomes a quoted brace.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["convert_escapes"]


def convert_escapes(pattern: str) -> str:
    """Convert a doubled-brace pattern to the quote convention.

    A run of N left braces yields N // 2 literal braces wrapped in one pair
    of apostrophes, followed by one active brace when N is odd. Handling
    whole runs keeps "{{{{" as two literal braces instead of "{'{".

    Returns the same object when nothing needed converting.

    Examples:
        >>> convert_escapes("{{")
        "'{'"
        >>> convert_escapes("{{{0}")
        "'{'{0}"
        >>> convert_escapes("It's {0}")
        "It''s {0}"
        >>> p = "Hello {0}"
        >>> convert_escapes(p) is p
        True
    """
    if "'" not in pattern and "{{" not in pattern:
        return pattern

    output: list[str] = []
    length = len(pattern)
    i = 0
    while i < length:
        char = pattern[i]
        if char == "'":
            output.append("''")
            i += 1
        elif char == "{":
            j = i + 1
            while j < length and pattern[j] == "{":
                j += 1
            run = j - i
            if run >= 2:
                output.append("'" + "{" * (run // 2) + "'")
            if run % 2:
                output.append("{")
            i = j
        else:
            output.append(char)
            i += 1
    return "".join(output)
