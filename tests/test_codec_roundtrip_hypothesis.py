"""Property tests for the catalog codec.

Properties:
    - dumps() then loads() reproduces any NUL-free catalog, order included
    - decoding never fails on text that contains no backslash
    - escaped fields never contain raw line terminators
"""

from __future__ import annotations

import pytest
from hypothesis import event, example, given, settings
from hypothesis import strategies as st

from tests.strategies import catalog_keys, catalog_values, catalogs
from textbundle.codec import Catalog, dumps, escape_key, escape_value, loads


class TestRoundTrip:
    """Encoding then decoding is the identity."""

    @given(catalog=catalogs())
    @example(catalog=Catalog({"": "#x"}))
    @example(catalog=Catalog({" ": " "}))
    @example(catalog=Catalog({"!a": "\r\n"}))
    def test_roundtrip_preserves_entries_and_order(self, catalog: Catalog) -> None:
        decoded = loads(dumps(catalog))
        assert list(decoded.items()) == list(catalog.items())

    @given(catalog=catalogs(), comment=st.text(max_size=40))
    def test_comment_does_not_leak_into_entries(self, catalog: Catalog, comment: str) -> None:
        event(f"comment_multiline={'\n' in comment or '\r' in comment}")
        assert loads(dumps(catalog, comment)) == catalog


class TestFieldEscaping:
    """Escaped fields stay on one physical line."""

    @given(key=catalog_keys())
    def test_escaped_key_is_single_line(self, key: str) -> None:
        escaped = escape_key(key)
        assert "\n" not in escaped
        assert "\r" not in escaped

    @given(value=catalog_values())
    def test_escaped_value_is_single_line(self, value: str) -> None:
        escaped = escape_value(value)
        assert "\n" not in escaped
        assert "\r" not in escaped


class TestDecoderRobustness:
    """Backslash-free input always decodes."""

    @given(source=st.text(alphabet=st.characters(blacklist_characters="\\")))
    def test_backslash_free_text_never_raises(self, source: str) -> None:
        loads(source)

    @pytest.mark.fuzz
    @settings(max_examples=5000)
    @given(source=st.text())
    def test_arbitrary_text_raises_only_malformed_escape(self, source: str) -> None:
        from textbundle.diagnostics import MalformedEscapeError

        try:
            loads(source)
        except MalformedEscapeError:
            event("outcome=malformed_escape")
        else:
            event("outcome=decoded")
