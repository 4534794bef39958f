"""Tests for tagged pronoun substitution."""

from __future__ import annotations

import pytest

from textbundle.localization import LocaleKey
from textbundle.substitution import TONGUES, CaselessDict, Pronoun, Tongue, expand


class TestCaselessDict:
    """Case-insensitive keys, original spelling kept."""

    def test_lookup_ignores_case(self) -> None:
        d = CaselessDict({"Name": 1})
        assert d["NAME"] == 1
        assert "name" in d
        assert 3 not in d

    def test_first_spelling_is_kept(self) -> None:
        d: CaselessDict[int] = CaselessDict()
        d["Name"] = 1
        d["NAME"] = 2
        assert list(d) == ["Name"]
        assert d["name"] == 2

    def test_delete_and_len(self) -> None:
        d = CaselessDict({"a": 1, "B": 2})
        del d["A"]
        assert len(d) == 1
        with pytest.raises(KeyError):
            d["a"]

    def test_repr(self) -> None:
        assert repr(CaselessDict({"Key": 1})) == "CaselessDict({'Key': 1})"


class TestPronoun:
    """Substitution tables."""

    def test_pairs(self) -> None:
        pronoun = Pronoun("t1s").add_substitutions("i", "I", "my", "my")
        assert pronoun.substitute("I") == "I"
        assert pronoun.substitute("MY") == "my"

    def test_odd_pairs_rejected(self) -> None:
        with pytest.raises(ValueError, match="pairs"):
            Pronoun("x").add_substitutions("i", "I", "me")

    def test_unknown_tag(self) -> None:
        with pytest.raises(KeyError):
            Pronoun("x").substitute("my")

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("i", "they"),
            ("me", "them"),
            ("my", "their"),
            ("mine", "theirs"),
            ("myself", "themself"),
            ("s", ""),
            ("sss", "y"),
            ("usi", "us"),
            ("$$$", "y"),
        ],
    )
    def test_they_them(self, tag: str, expected: str) -> None:
        assert Pronoun.they_them().substitute(tag) == expected

    @pytest.mark.parametrize(
        ("name", "expected"), [("Ash", "Ash's"), ("Jess", "Jess'"), ("", "")]
    )
    def test_possessive_name(self, name: str, expected: str) -> None:
        assert Pronoun.they_them().substitute("name_s", name) == expected

    def test_name_and_direct(self) -> None:
        they = Pronoun.they_them()
        assert they.substitute("name", "Ash") == "Ash"
        assert they.substitute("direct", "Ash") == "Ash"


class TestTongue:
    """Per-language pronoun registries."""

    def test_default_english(self) -> None:
        english = TONGUES["en_US"]
        assert english.locale_key == LocaleKey("en", "US")
        assert english.tag == "en_US"
        assert english.pronouns["t3s"].substitute("i") == "they"

    def test_register_replaces_by_tag(self) -> None:
        tongue = Tongue(LocaleKey("en"))
        first = Pronoun("t3s")
        second = Pronoun("t3s")
        tongue.register_pronoun(first).register_pronoun(second)
        assert tongue.pronouns == {"t3s": second}


class TestExpand:
    """Tag expansion in rendered text."""

    def test_example_sentence(self) -> None:
        they = Pronoun.they_them()
        assert expand("@1name_s blade@1s glow@1$$.", (they, "Ash")) == "Ash's blade glow."

    def test_two_participants(self) -> None:
        they = Pronoun.they_them()
        you = Pronoun("t2").add_substitutions("me", "you", "my", "your")
        text = "The goblin@1s slash@1$$ @2me with @1my wicked blade@1s!"
        assert expand(text, (they, "goblin"), (you, "")) == (
            "The goblin slash you with their wicked blade!"
        )

    def test_longest_tag_wins(self) -> None:
        they = Pronoun.they_them()
        assert expand("@1myself and @1my", (they, "")) == "themself and their"

    def test_tags_are_case_insensitive(self) -> None:
        assert expand("@1MY", (Pronoun.they_them(), "")) == "their"

    def test_unknown_participant_left_as_written(self) -> None:
        assert expand("@2my", (Pronoun.they_them(), "")) == "@2my"

    def test_unknown_tag_left_as_written(self) -> None:
        assert expand("@1zzz", (Pronoun.they_them(), "")) == "@1zzz"

    def test_text_without_tags(self) -> None:
        text = "plain"
        assert expand(text) is text
