"""Process-wide configuration for bundle resolution and lookup.

BundleConfig is an immutable value. Every operation that depends on it
accepts an explicit ``config=`` argument and otherwise reads the current
global value at call time, so a change is seen by the next call and never
by one already running.

Example:
    >>> from textbundle.config import get_config, set_missing_key_policy
    >>> from textbundle.enums import MissingKeyPolicy
    >>> set_missing_key_policy(MissingKeyPolicy.SENTINEL)
    >>> get_config().missing_key_policy
    <MissingKeyPolicy.SENTINEL: 'sentinel'>

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from threading import Lock
from typing import TYPE_CHECKING

from textbundle.constants import FALLBACK_DEFAULT_LOCALE, SENTINEL_MARKER
from textbundle.enums import MissingKeyPolicy
from textbundle.locale_utils import get_system_locale

if TYPE_CHECKING:
    from textbundle.localization.locale_key import LocaleKey

__all__ = [
    "BundleConfig",
    "get_config",
    "reset_config",
    "set_config",
    "set_default_locale",
    "set_missing_key_policy",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BundleConfig:
    """Configuration read by resolve_bundle() and Bundle lookups.

    Attributes:
        default_locale: Locale retried when only ROOT matched the request;
            None means the operating system's locale, detected on each read
        missing_key_policy: Raise MissingKeyError or return a sentinel string
        sentinel_marker: Text placed before and after a missing key
    """

    default_locale: LocaleKey | None = None
    missing_key_policy: MissingKeyPolicy = MissingKeyPolicy.RAISE
    sentinel_marker: str = SENTINEL_MARKER

    def resolve_default_locale(self) -> LocaleKey:
        """Configured default locale, or the system locale when unset.

        A system locale that is not a valid locale key (e.g. "English_United
        States") is replaced by en_US with a logged warning.
        """
        if self.default_locale is not None:
            return self.default_locale
        from textbundle.localization.locale_key import LocaleKey  # noqa: PLC0415

        system_locale = get_system_locale()
        try:
            return LocaleKey.parse(system_locale)
        except ValueError:
            logger.warning(
                "Cannot use system locale '%s' as default. Falling back to %s",
                system_locale, FALLBACK_DEFAULT_LOCALE,
            )
            return LocaleKey.parse(FALLBACK_DEFAULT_LOCALE)

    def sentinel(self, key: str) -> str:
        """Key wrapped in the sentinel marker: ???key???"""
        return f"{self.sentinel_marker}{key}{self.sentinel_marker}"


_lock = Lock()
_config = BundleConfig()


def get_config() -> BundleConfig:
    """Current global configuration."""
    return _config


def set_config(config: BundleConfig) -> None:
    """Replace the global configuration."""
    global _config  # noqa: PLW0603
    with _lock:
        _config = config
    logger.debug("Configuration set to %r", config)


def set_default_locale(locale: LocaleKey | str | None) -> None:
    """Set the global default locale; None restores system detection.

    Raises:
        ValueError: If a locale string cannot be parsed
    """
    if isinstance(locale, str):
        from textbundle.localization.locale_key import LocaleKey  # noqa: PLC0415

        locale = LocaleKey.parse(locale)
    global _config  # noqa: PLW0603
    with _lock:
        _config = replace(_config, default_locale=locale)


def set_missing_key_policy(policy: MissingKeyPolicy) -> None:
    """Set the global missing-key policy."""
    global _config  # noqa: PLW0603
    with _lock:
        _config = replace(_config, missing_key_policy=MissingKeyPolicy(policy))


def reset_config() -> None:
    """Restore the default configuration."""
    set_config(BundleConfig())
