"""Hypothesis strategies for the key/value catalog codec.

Text is biased toward the characters the escaping grammar treats specially
so round-trip properties exercise every escape path.

Events emitted:
- catalog_value_kind=plain|escape_heavy|unicode
- catalog_size=empty|small|large

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

from textbundle.codec import Catalog

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

# Characters with a special meaning somewhere in the grammar
ESCAPE_HEAVY_CHARS = " \t\f\r\n\\=#!:\x00\x01\x1b\x7f"

_PLAIN_CHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789._-"

# No surrogates: catalogs are text, not UTF-16 code units
_ANY_TEXT = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\x00"),
    max_size=30,
)


@st.composite
def catalog_values(draw: DrawFn) -> str:
    """Generate NUL-free values, often dense in escape-worthy characters."""
    kind = draw(st.sampled_from(["plain", "escape_heavy", "unicode"]))
    event(f"catalog_value_kind={kind}")
    match kind:
        case "plain":
            return draw(st.text(alphabet=_PLAIN_CHARS + " ", max_size=30))
        case "escape_heavy":
            alphabet = _PLAIN_CHARS[:5] + ESCAPE_HEAVY_CHARS.replace("\x00", "")
            return draw(st.text(alphabet=alphabet, max_size=30))
        case _:
            return draw(_ANY_TEXT)


def catalog_keys() -> st.SearchStrategy[str]:
    """Generate NUL-free keys, including empty and blank-laden ones."""
    return st.one_of(
        st.text(alphabet=_PLAIN_CHARS, min_size=1, max_size=20),
        catalog_values(),
    )


@st.composite
def catalogs(draw: DrawFn, max_size: int = 10) -> Catalog:
    """Generate catalogs with unique keys in random order."""
    entries = draw(st.dictionaries(catalog_keys(), catalog_values(), max_size=max_size))
    size_class = "empty" if not entries else "small" if len(entries) <= 3 else "large"
    event(f"catalog_size={size_class}")
    return Catalog(entries)


@st.composite
def doubled_brace_patterns(draw: DrawFn) -> str:
    """Generate text mixing brace runs, apostrophes and plain words."""
    pieces = draw(
        st.lists(
            st.one_of(
                st.text(alphabet="ab ", min_size=1, max_size=4),
                st.integers(min_value=1, max_value=5).map(lambda n: "{" * n),
                st.just("'"),
                st.just("}"),
            ),
            max_size=10,
        )
    )
    return "".join(pieces)
