"""Bundle resolution: candidate chain construction and default-locale retry.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from textbundle.config import BundleConfig, get_config
from textbundle.diagnostics import ErrorTemplate, MissingBundleError

from .bundle import Bundle
from .loading import CatalogLoader
from .locale_key import ROOT, LocaleKey, derive_candidates
from .types import BaseId, LocaleTag

__all__ = ["build_chain", "resolve_bundle"]

logger = logging.getLogger(__name__)


def build_chain(
    base_id: BaseId,
    candidates: Sequence[LocaleKey],
    loader: CatalogLoader,
    base_bundle: Bundle | None = None,
) -> Bundle | None:
    """Load candidates and link them into a parent chain.

    Candidates are processed least specific first so each bundle is created
    with its parent already built. Candidates without a catalog are skipped.
    When base_bundle is given it stands in for a trailing ROOT candidate
    without loading it again.

    Args:
        base_id: Base resource identifier
        candidates: Locale keys, most specific first
        loader: Catalog source
        base_bundle: Previously built ROOT bundle to reuse

    Returns:
        Bundle of the most specific candidate that loaded, or None if none did

    Raises:
        MalformedEscapeError: If a catalog exists but cannot be decoded
    """
    bundle: Bundle | None = None
    last = len(candidates) - 1
    for position in range(last, -1, -1):
        candidate = candidates[position]
        if position == last and base_bundle is not None and candidate == ROOT:
            logger.debug("Reusing ROOT bundle for '%s'", base_id)
            bundle = base_bundle
            continue
        catalog = loader.try_load(base_id, candidate)
        if catalog is None:
            logger.debug("No catalog for %s", loader.describe_path(base_id, candidate))
            continue
        logger.debug(
            "Linked %s -> %s",
            loader.describe_path(base_id, candidate),
            bundle.locale_key.tag if bundle is not None else None,
        )
        bundle = Bundle(candidate, catalog, bundle)
    return bundle


def resolve_bundle(
    base_id: BaseId,
    locale: LocaleKey | LocaleTag | None,
    loader: CatalogLoader,
    *,
    config: BundleConfig | None = None,
) -> Bundle:
    """Resolve the bundle chain for base_id in locale.

    If only the ROOT catalog matches the requested locale, the search is
    repeated once with the configured default locale, reusing the ROOT
    bundle already built.

    Args:
        base_id: Base resource identifier
        locale: Requested locale; None uses the configured default locale
        loader: Catalog source
        config: Configuration to apply (default: current global config)

    Returns:
        Most specific bundle found, linked to its fallbacks

    Raises:
        MissingBundleError: If no catalog exists for any candidate
        MalformedEscapeError: If a catalog exists but cannot be decoded
        ValueError: If locale cannot be parsed

    Example:
        >>> from textbundle.localization import MemoryCatalogLoader
        >>> loader = MemoryCatalogLoader({"app.txt": "hi=Hi", "app_en.txt": "hi=Hello"})
        >>> resolve_bundle("app", "en_US", loader).locale_key.tag
        'en'
    """
    cfg = config if config is not None else get_config()
    # Read only when a round ends at ROOT and a retry is due
    default: LocaleKey | None = None
    match locale:
        case None:
            requested = default = cfg.resolve_default_locale()
        case str():
            requested = LocaleKey.parse(locale)
        case _:
            requested = locale

    target: LocaleKey | None = requested
    base_bundle: Bundle | None = None
    bundle: Bundle | None = None
    while target is not None:
        candidates = derive_candidates(target)
        bundle = build_chain(base_id, candidates, loader, base_bundle)
        if bundle is not None:
            found = bundle.locale_key
            if not found.is_root or found == requested:
                break
            if len(candidates) == 1 and found == candidates[0]:
                break
            if base_bundle is None:
                base_bundle = bundle
        if default is None:
            default = cfg.resolve_default_locale()
        if target == default:
            target = None
        else:
            logger.info(
                "No '%s' catalog for '%s', retrying with default locale '%s'",
                base_id, target.tag, default.tag,
            )
            target = default

    if bundle is None:
        if base_bundle is None:
            raise MissingBundleError(
                ErrorTemplate.bundle_not_found(base_id, requested.tag),
                base_id=base_id,
                locale=requested.tag,
            )
        bundle = base_bundle

    logger.info("Resolved '%s' for '%s' to '%s'", base_id, requested.tag, bundle.locale_key.tag)
    return bundle
