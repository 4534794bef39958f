"""Tests for Bundle lookup, formatting and the missing-key policies."""

from __future__ import annotations

import logging

import pytest

from textbundle import Bundle, BundleConfig, LocaleKey, MissingKeyError, MissingKeyPolicy
from textbundle.codec import Catalog
from textbundle.config import set_missing_key_policy
from textbundle.localization import ROOT


@pytest.fixture
def chain() -> Bundle:
    root = Bundle(ROOT, Catalog({"ok": "OK", "bye": "Bye", "count": "{0} items"}))
    de = Bundle(LocaleKey("de"), Catalog({"bye": "Tschüss"}), root)
    return Bundle(LocaleKey("de", "DE"), Catalog({"hello": "Servus"}), de)


class TestLookup:
    """get() walks the parent chain."""

    def test_own_key(self, chain: Bundle) -> None:
        assert chain.get("hello") == "Servus"

    def test_parent_key(self, chain: Bundle) -> None:
        assert chain.get("bye") == "Tschüss"

    def test_root_key(self, chain: Bundle) -> None:
        assert chain.get("ok") == "OK"

    def test_most_specific_value_wins(self) -> None:
        root = Bundle(ROOT, Catalog({"k": "root"}))
        en = Bundle(LocaleKey("en"), Catalog({"k": "en"}), root)
        assert en.get("k") == "en"
        assert root.get("k") == "root"

    def test_empty_value_is_a_hit(self) -> None:
        root = Bundle(ROOT, Catalog({"k": "root"}))
        en = Bundle(LocaleKey("en"), Catalog({"k": ""}), root)
        assert en.get("k") == ""

    def test_has_key(self, chain: Bundle) -> None:
        assert chain.has_key("ok")
        assert not chain.has_key("nope")

    def test_keys_are_own_keys_only(self, chain: Bundle) -> None:
        assert chain.keys() == ("hello",)

    def test_chain_order(self, chain: Bundle) -> None:
        assert [b.locale_key.tag for b in chain.chain()] == ["de_DE", "de", ""]


class TestMissingKeys:
    """RAISE and SENTINEL policies."""

    def test_raise_is_default(self, chain: Bundle) -> None:
        with pytest.raises(MissingKeyError, match="nope") as exc_info:
            chain.get("nope")
        assert exc_info.value.key == "nope"
        assert exc_info.value.locale == "de_DE"
        assert exc_info.value.diagnostic is not None

    def test_sentinel_from_global_config(
        self, chain: Bundle, caplog: pytest.LogCaptureFixture
    ) -> None:
        set_missing_key_policy(MissingKeyPolicy.SENTINEL)
        with caplog.at_level(logging.WARNING, logger="textbundle.localization.bundle"):
            assert chain.get("nope") == "???nope???"
        assert "nope" in caplog.text

    def test_policy_change_is_seen_by_next_call(self, chain: Bundle) -> None:
        with pytest.raises(MissingKeyError):
            chain.get("nope")
        set_missing_key_policy(MissingKeyPolicy.SENTINEL)
        assert chain.get("nope") == "???nope???"

    def test_explicit_config_overrides_global(self, chain: Bundle) -> None:
        set_missing_key_policy(MissingKeyPolicy.SENTINEL)
        with pytest.raises(MissingKeyError):
            chain.get("nope", config=BundleConfig(missing_key_policy=MissingKeyPolicy.RAISE))

    def test_custom_sentinel_marker(self, chain: Bundle) -> None:
        config = BundleConfig(missing_key_policy=MissingKeyPolicy.SENTINEL, sentinel_marker="!!")
        assert chain.get("nope", config=config) == "!!nope!!"

    def test_format_returns_sentinel_for_missing_key(self, chain: Bundle) -> None:
        config = BundleConfig(missing_key_policy=MissingKeyPolicy.SENTINEL)
        assert chain.format("nope", "x", config=config) == "???nope???"


class TestFormat:
    """format() renders with the bundle's own locale."""

    def test_positional_arguments(self) -> None:
        root = Bundle(ROOT, Catalog({"greet": "Hello, {0}! It's {1}."}))
        assert root.format("greet", "Ash", "late") == "Hello, Ash! It's late."

    def test_doubled_brace_is_literal(self) -> None:
        root = Bundle(ROOT, Catalog({"k": "{{0} is {0}"}))
        assert root.format("k", "x") == "{0} is x"

    def test_plain_value_is_returned_as_stored(self) -> None:
        catalog = Catalog({"k": "".join(["Saved", " all files."])})
        root = Bundle(ROOT, catalog)
        assert root.format("k") is catalog["k"]

    def test_number_uses_bundle_locale(self) -> None:
        de = Bundle(LocaleKey("de", "DE"), Catalog({"count": "{0,number} Dateien"}))
        assert de.format("count", 1234.5) == "1.234,5 Dateien"

    def test_root_formats_in_english(self, chain: Bundle) -> None:
        root = next(b for b in chain.chain() if b.locale_key.is_root)
        assert root.format("count", 1234) == "1,234 items"

    def test_inherited_value_uses_requesting_bundle_locale(self, chain: Bundle) -> None:
        assert chain.format("count", 1234) == "1.234 items"

    def test_missing_key_raises(self, chain: Bundle) -> None:
        with pytest.raises(MissingKeyError):
            chain.format("nope")


class TestStructure:
    """Parent validation, debug placeholders and repr."""

    def test_parent_must_be_less_specific(self) -> None:
        de = Bundle(LocaleKey("de"), Catalog())
        with pytest.raises(ValueError, match="not less specific"):
            Bundle(LocaleKey("fr"), Catalog(), de)

    def test_root_cannot_have_a_parent(self) -> None:
        with pytest.raises(ValueError, match="not less specific"):
            Bundle(ROOT, Catalog(), Bundle(ROOT, Catalog()))

    def test_parent_is_immutable(self, chain: Bundle) -> None:
        with pytest.raises(AttributeError):
            chain.parent = None  # type: ignore[misc]

    def test_debug_replaces_own_values_only(self, chain: Bundle) -> None:
        chain.debug("XXX")
        assert chain.get("hello") == "XXX"
        assert chain.get("bye") == "Tschüss"

    def test_repr(self, chain: Bundle) -> None:
        assert repr(chain) == "Bundle(locale='de_DE', keys=1, parent='de')"
