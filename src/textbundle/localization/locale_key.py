"""LocaleKey and candidate derivation.

A LocaleKey is the (language, country, variant) triple that names one
catalog. Resolution walks from the most specific candidate to ROOT.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from textbundle.constants import ROOT_FORMATTING_LOCALE
from textbundle.diagnostics import ErrorTemplate
from textbundle.locale_utils import normalize_locale

from .types import LocaleTag

__all__ = ["ROOT", "LocaleKey", "derive_candidates"]

_SCRIPT_SUBTAG_LENGTH = 4


def _validate_component(text: str, component: str, *, allow_underscore: bool = False) -> None:
    allowed = text.replace("_", "").replace("-", "") if allow_underscore else text
    if allowed and not allowed.isalnum():
        reason = f"{component} must be alphanumeric, got {text!r}"
        raise ValueError(ErrorTemplate.invalid_locale_key(text, reason).message)


@dataclass(frozen=True, slots=True)
class LocaleKey:
    """Immutable (primary, secondary, tertiary) locale key.

    An empty component is absent. Language is stored lower-case and country
    upper-case; the variant is kept as written.

    Examples:
        >>> LocaleKey("EN", "us")
        LocaleKey(primary='en', secondary='US', tertiary='')
        >>> LocaleKey.parse("de-DE").tag
        'de_DE'
        >>> LocaleKey.parse("fr__X").secondary
        ''
    """

    ROOT: ClassVar[LocaleKey]

    primary: str = ""
    secondary: str = ""
    tertiary: str = ""

    def __post_init__(self) -> None:
        _validate_component(self.primary, "language")
        _validate_component(self.secondary, "country")
        _validate_component(self.tertiary, "variant", allow_underscore=True)
        object.__setattr__(self, "primary", self.primary.lower())
        object.__setattr__(self, "secondary", self.secondary.upper())

    @classmethod
    def parse(cls, text: LocaleTag) -> LocaleKey:
        """Parse "lang", "lang_COUNTRY", "lang_COUNTRY_variant" or BCP-47 forms.

        Encoding suffixes are ignored. A four-letter script subtag right after
        the language is dropped ("zh-Hant-TW" is zh_TW). Everything after the
        country is the variant.

        Raises:
            ValueError: If a component contains non-alphanumeric characters
        """
        language, _, rest = normalize_locale(text.strip()).partition("_")
        script, _, after_script = rest.partition("_")
        if len(script) == _SCRIPT_SUBTAG_LENGTH and script.isalpha():
            rest = after_script
        country, _, variant = rest.partition("_")
        return cls(language, country, variant)

    @property
    def tag(self) -> str:
        """Canonical "lang_COUNTRY_variant" text, trailing empty parts omitted."""
        if self.tertiary:
            return f"{self.primary}_{self.secondary}_{self.tertiary}"
        if self.secondary:
            return f"{self.primary}_{self.secondary}"
        return self.primary

    @property
    def is_root(self) -> bool:
        """True for the all-absent key."""
        return not (self.primary or self.secondary or self.tertiary)

    @property
    def formatting_locale(self) -> str:
        """Locale code used to render arguments; ROOT renders as English."""
        return self.tag if self.primary else ROOT_FORMATTING_LOCALE

    def __str__(self) -> str:
        return self.tag


ROOT = LocaleKey()
LocaleKey.ROOT = ROOT


def derive_candidates(locale_key: LocaleKey) -> tuple[LocaleKey, ...]:
    """Candidate keys, most specific first, always ending with ROOT.

    Each present component contributes one candidate; the most specific
    present component contributes the key itself, so a key with a variant
    but no country skips the (lang, COUNTRY) step. A key without a language
    has only ROOT as candidate.

    Examples:
        >>> [c.tag for c in derive_candidates(LocaleKey("de", "DE", "PREEURO"))]
        ['de_DE_PREEURO', 'de_DE', 'de', '']
        >>> [c.tag for c in derive_candidates(LocaleKey.parse("fr__X"))]
        ['fr__X', 'fr', '']
    """
    if not locale_key.primary:
        return (ROOT,)
    candidates: list[LocaleKey] = []
    if locale_key.tertiary:
        candidates.append(locale_key)
    if locale_key.secondary:
        candidates.append(
            LocaleKey(locale_key.primary, locale_key.secondary) if candidates else locale_key
        )
    candidates.append(LocaleKey(locale_key.primary) if candidates else locale_key)
    candidates.append(ROOT)
    return tuple(candidates)
