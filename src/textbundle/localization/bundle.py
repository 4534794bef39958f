"""Bundle - one resolved catalog linked to its less specific parent.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from textbundle.codec import Catalog
from textbundle.config import BundleConfig, get_config
from textbundle.diagnostics import ErrorTemplate, MissingKeyError
from textbundle.enums import MissingKeyPolicy
from textbundle.runtime import format_message

from .locale_key import LocaleKey
from .types import MessageKey

__all__ = ["Bundle"]

logger = logging.getLogger(__name__)


def _specificity(locale_key: LocaleKey) -> int:
    return sum(1 for part in (locale_key.primary, locale_key.secondary, locale_key.tertiary) if part)


@dataclass(frozen=True, slots=True, eq=False)
class Bundle:
    """Catalog for one locale plus the parent consulted on a miss.

    The parent is fixed at construction. Chains end at a bundle without a
    parent, normally the ROOT bundle.

    Attributes:
        locale_key: Locale of the catalog actually loaded
        catalog: Entries of this bundle only
        parent: Less specific bundle, or None at the end of the chain

    Example:
        >>> root = Bundle(LocaleKey.ROOT, Catalog({"ok": "OK", "bye": "Bye"}))
        >>> de = Bundle(LocaleKey("de"), Catalog({"bye": "Tschüss"}), root)
        >>> de.get("bye"), de.get("ok")
        ('Tschüss', 'OK')
    """

    locale_key: LocaleKey
    catalog: Catalog
    parent: Bundle | None = None

    def __post_init__(self) -> None:
        if self.parent is not None and _specificity(self.parent.locale_key) >= _specificity(
            self.locale_key
        ):
            msg = (
                f"Parent locale '{self.parent.locale_key}' is not less specific "
                f"than '{self.locale_key}'"
            )
            raise ValueError(msg)

    def chain(self) -> Iterator[Bundle]:
        """Iterate this bundle and its ancestors, most specific first."""
        bundle: Bundle | None = self
        while bundle is not None:
            yield bundle
            bundle = bundle.parent

    def has_key(self, key: MessageKey) -> bool:
        """True if any bundle in the chain defines key."""
        return any(key in bundle.catalog for bundle in self.chain())

    def keys(self) -> tuple[MessageKey, ...]:
        """Keys defined by this bundle's own catalog, in definition order."""
        return tuple(self.catalog)

    def get(self, key: MessageKey, *, config: BundleConfig | None = None) -> str:
        """Look up the raw value of key, walking the parent chain.

        Args:
            key: Catalog key
            config: Configuration to apply (default: current global config)

        Returns:
            The first value found, or the sentinel string under the
            SENTINEL policy

        Raises:
            MissingKeyError: If no bundle in the chain has key under the RAISE policy
        """
        for bundle in self.chain():
            value = bundle.catalog.get(key)
            if value is not None:
                return value

        cfg = config if config is not None else get_config()
        tag = self.locale_key.tag
        if cfg.missing_key_policy is MissingKeyPolicy.SENTINEL:
            logger.warning("Key '%s' not found in bundle '%s'", key, tag)
            return cfg.sentinel(key)
        raise MissingKeyError(ErrorTemplate.key_not_found(key, tag), key=key, locale=tag)

    def format(self, key: MessageKey, *args: object, config: BundleConfig | None = None) -> str:
        """Look up key and render it with args in this bundle's locale.

        A literal left brace is written "{{" in catalog values; apostrophes
        need no escaping.

        Raises:
            MissingKeyError: If key is missing under the RAISE policy
            InvalidTemplateError: If the value is not a valid template
            FormattingError: If an argument cannot be rendered
        """
        return format_message(self.get(key, config=config), args, self.locale_key.formatting_locale)

    def debug(self, placeholder: str) -> None:
        """Replace every value of this bundle's catalog with placeholder.

        Text that still shows up unchanged was never looked up through the
        bundle. Parents are not affected and the change cannot be undone.
        """
        self.catalog.fill_placeholder(placeholder)

    def __repr__(self) -> str:
        parent = self.parent.locale_key.tag if self.parent is not None else None
        return (
            f"Bundle(locale={self.locale_key.tag!r}, keys={len(self.catalog)}, "
            f"parent={parent!r})"
        )
