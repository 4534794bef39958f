"""Tagged pronoun and suffix substitution for rendered text.

An optional post-processing stage, separate from bundle resolution. Text
refers to participants by position and a tag:

    The goblin@1s slash@1$$ @2me with @1my wicked blade@1s!

With participant 1 using they/them and participant 2 named "you", the
tags expand to the participant's forms:

    The goblin slash you with their wicked blade!

Tags match case-insensitively and the longest registered tag wins, so
"@1myself" is "myself", not "my" + "self".

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping, MutableMapping
from typing import Self

from textbundle.localization import LocaleKey

__all__ = [
    "TONGUES",
    "CaselessDict",
    "Pronoun",
    "Tongue",
    "expand",
]

type Substitution = Callable[[str], str]

_PARTICIPANT_TAG = re.compile(r"@([1-9])")


class CaselessDict[V](MutableMapping[str, V]):
    """Insertion-ordered mapping with case-insensitive string keys.

    The spelling used when a key was first inserted is kept for iteration.

    Example:
        >>> d = CaselessDict({"Name": 1})
        >>> d["NAME"], list(d)
        (1, ['Name'])
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, V] | None = None) -> None:
        self._entries: dict[str, tuple[str, V]] = {}
        if entries:
            self.update(entries)

    def __getitem__(self, key: str) -> V:
        return self._entries[key.casefold()][1]

    def __setitem__(self, key: str, value: V) -> None:
        folded = key.casefold()
        original = self._entries[folded][0] if folded in self._entries else key
        self._entries[folded] = (original, value)

    def __delitem__(self, key: str) -> None:
        del self._entries[key.casefold()]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.casefold() in self._entries

    def __repr__(self) -> str:
        return f"CaselessDict({dict(self.items())!r})"


def _constant(text: str) -> Substitution:
    return lambda _name: text


def _possessive(name: str) -> str:
    if not name:
        return ""
    return f"{name}'" if name.endswith("s") else f"{name}'s"


class Pronoun:
    """Table from tag to substitution function for one way of being referred to.

    Attributes:
        tag: Identifier of the table, e.g. "t3s" for third person singular they
        substitutions: Tag -> function of the participant's name
    """

    __slots__ = ("substitutions", "tag")

    def __init__(self, tag: str) -> None:
        self.tag = tag
        self.substitutions: CaselessDict[Substitution] = CaselessDict()

    def add_substitutions(self, *pairs: str) -> Self:
        """Register constant replacements given as tag, text, tag, text, ...

        Raises:
            ValueError: If an odd number of strings is given
        """
        if len(pairs) % 2:
            msg = f"Substitutions come in tag/text pairs, got {len(pairs)} strings"
            raise ValueError(msg)
        for tag, text in zip(pairs[::2], pairs[1::2], strict=True):
            self.substitutions[tag] = _constant(text)
        return self

    def substitute(self, tag: str, name: str = "") -> str:
        """Apply the substitution registered for tag.

        Raises:
            KeyError: If tag is not registered
        """
        return self.substitutions[tag](name)

    @classmethod
    def they_them(cls) -> Pronoun:
        """Third person singular they/them ("t3s").

        Verb and noun suffix tags ("s", "ss", "sss", "$", "$$", "$$$", ...)
        choose the forms that agree with "they".
        """
        pronoun = cls("t3s").add_substitutions(
            "i", "they", "me", "them", "my", "their", "mine", "theirs", "myself", "themself",
            "s", "", "ss", "", "sss", "y", "usi", "us", "fves", "f",
            "$", "", "$$", "", "$$$", "y",
        )
        pronoun.substitutions["name"] = lambda name: name
        pronoun.substitutions["name_s"] = _possessive
        pronoun.substitutions["direct"] = lambda name: name
        return pronoun

    def __repr__(self) -> str:
        return f"Pronoun({self.tag!r}, tags={list(self.substitutions)!r})"


class Tongue:
    """Pronoun tables available for one language.

    Example:
        >>> TONGUES["en_US"].pronouns["t3s"].substitute("my")
        'their'
    """

    __slots__ = ("locale_key", "pronouns")

    def __init__(self, locale_key: LocaleKey) -> None:
        self.locale_key = locale_key
        self.pronouns: dict[str, Pronoun] = {}

    @property
    def tag(self) -> str:
        """Locale tag of this tongue."""
        return self.locale_key.tag

    def register_pronoun(self, pronoun: Pronoun) -> Self:
        """Add or replace a pronoun table under its tag."""
        self.pronouns[pronoun.tag] = pronoun
        return self

    def __repr__(self) -> str:
        return f"Tongue({self.tag!r}, pronouns={list(self.pronouns)!r})"


def _default_tongues() -> dict[str, Tongue]:
    english = Tongue(LocaleKey("en", "US")).register_pronoun(Pronoun.they_them())
    return {english.tag: english}


TONGUES: dict[str, Tongue] = _default_tongues()


def _longest_tag(text: str, start: int, pronoun: Pronoun) -> str | None:
    best: str | None = None
    for tag in pronoun.substitutions:
        end = start + len(tag)
        if (best is None or len(tag) > len(best)) and text[start:end].casefold() == tag.casefold():
            best = tag
    return best


def expand(text: str, *participants: tuple[Pronoun, str]) -> str:
    """Replace "@N<tag>" with participant N's substitution for tag.

    Participants are (pronoun, name) pairs numbered from 1. A reference to a
    missing participant or an unregistered tag is left as written.

    Example:
        >>> they = Pronoun.they_them()
        >>> expand("@1name_s blade@1s glow@1$$.", (they, "Ash"))
        "Ash's blade glow."
    """
    if "@" not in text:
        return text
    output: list[str] = []
    position = 0
    for match in _PARTICIPANT_TAG.finditer(text):
        if match.start() < position:
            continue
        number = int(match.group(1))
        if number > len(participants):
            continue
        pronoun, name = participants[number - 1]
        tag = _longest_tag(text, match.end(), pronoun)
        if tag is None:
            continue
        output.append(text[position : match.start()])
        output.append(pronoun.substitute(tag, name))
        position = match.end() + len(tag)
    output.append(text[position:])
    return "".join(output)
