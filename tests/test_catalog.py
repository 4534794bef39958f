"""Tests for Catalog - the ordered, read-only key/value mapping."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping

import pytest

from textbundle.codec import Catalog


class TestCatalogMapping:
    """Read-only Mapping behavior."""

    def test_is_mapping_not_mutable_mapping(self) -> None:
        catalog = Catalog({"a": "1"})
        assert isinstance(catalog, Mapping)
        assert not isinstance(catalog, MutableMapping)

    def test_item_assignment_is_rejected(self) -> None:
        catalog = Catalog({"a": "1"})
        with pytest.raises(TypeError):
            catalog["a"] = "2"  # type: ignore[index]

    def test_iteration_follows_construction_order(self) -> None:
        assert list(Catalog([("z", "1"), ("a", "2")])) == ["z", "a"]

    def test_missing_key_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            Catalog()["nope"]

    def test_get_and_contains(self) -> None:
        catalog = Catalog({"a": "1"})
        assert "a" in catalog
        assert 1 not in catalog
        assert catalog.get("b") is None

    def test_equality_with_dict(self) -> None:
        assert Catalog({"a": "1"}) == {"a": "1"}

    def test_construction_copies_input(self) -> None:
        source = {"a": "1"}
        catalog = Catalog(source)
        source["a"] = "changed"
        assert catalog["a"] == "1"

    def test_repr(self) -> None:
        assert repr(Catalog({"a": "1"})) == "Catalog({'a': '1'})"


class TestFillPlaceholder:
    """The debug fill operation."""

    def test_replaces_every_value(self) -> None:
        catalog = Catalog([("a", "1"), ("b", "2")])
        catalog.fill_placeholder("###")
        assert dict(catalog) == {"a": "###", "b": "###"}

    def test_keeps_keys_and_order(self) -> None:
        catalog = Catalog([("b", "1"), ("a", "2")])
        catalog.fill_placeholder("x")
        assert list(catalog) == ["b", "a"]
