"""Catalog loading for the resource resolver.

The resolver asks a loader for one catalog per candidate locale. A missing
catalog is an expected outcome (None), not an error; malformed catalog text
and I/O failures propagate.

Components:
    CatalogLoader - Protocol for catalog loaders (structural typing)
    resource_name - File naming rule: base_lang_COUNTRY_variant.txt
    PathCatalogLoader - Disk-based loader with path-traversal prevention
    MemoryCatalogLoader - Loader over in-memory sources, for tests and embedding

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from textbundle.codec import Catalog, load, loads
from textbundle.constants import DEFAULT_ENCODING, DEFAULT_RESOURCE_SUFFIX

from .locale_key import LocaleKey
from .types import BaseId, CatalogSource

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "CatalogLoader",
    # Naming
    "resource_name",
    # Concrete loaders
    "PathCatalogLoader",
    "MemoryCatalogLoader",
]

logger = logging.getLogger(__name__)


class CatalogLoader(Protocol):
    """Protocol for loading the catalog of one candidate locale.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom loaders.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, data: dict[str, dict[str, str]]) -> None:
        ...         self.data = data
        ...     def try_load(self, base_id: str, locale_key: LocaleKey) -> Catalog | None:
        ...         entries = self.data.get(locale_key.tag)
        ...         return None if entries is None else Catalog(entries)
        ...     def describe_path(self, base_id: str, locale_key: LocaleKey) -> str:
        ...         return resource_name(base_id, locale_key)
    """

    def try_load(self, base_id: BaseId, locale_key: LocaleKey) -> Catalog | None:
        """Load the catalog for base_id in exactly locale_key.

        Args:
            base_id: Base resource identifier
            locale_key: Candidate locale (no fallback inside the loader)

        Returns:
            Decoded catalog, or None if no resource exists for this candidate

        Raises:
            MalformedEscapeError: If the resource exists but cannot be decoded
            OSError: If the resource exists but cannot be read
        """

    def describe_path(self, base_id: BaseId, locale_key: LocaleKey) -> str:
        """Return human-readable resource location for diagnostics."""
        return resource_name(base_id, locale_key)


def resource_name(
    base_id: BaseId, locale_key: LocaleKey, suffix: str = DEFAULT_RESOURCE_SUFFIX
) -> str:
    """Resource name of base_id for one locale.

    Appends "_" plus the locale's tag, omitting trailing empty components.
    ROOT maps to the bare base name.

    Examples:
        >>> resource_name("messages", LocaleKey("de", "DE", "PREEURO"))
        'messages_de_DE_PREEURO.txt'
        >>> resource_name("messages", LocaleKey.parse("fr__X"))
        'messages_fr__X.txt'
        >>> resource_name("messages", LocaleKey.ROOT)
        'messages.txt'
    """
    if locale_key.is_root:
        return f"{base_id}{suffix}"
    return f"{base_id}_{locale_key.tag}{suffix}"


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """File system catalog loader.

    Catalog files live under a fixed root directory and follow
    resource_name(): "<root>/<base_id>_<lang>_<COUNTRY>_<variant><suffix>".
    A base_id may contain "/" to reach a subdirectory of the root.

    Security:
        base_id values that are absolute or contain ".." are rejected.
        All resolved paths are validated against the root directory.

    Example:
        >>> loader = PathCatalogLoader("i18n")
        >>> catalog = loader.try_load("messages", LocaleKey("en", "US"))
        # Reads: i18n/messages_en_US.txt

    Attributes:
        root_dir: Directory that holds all catalogs
        suffix: File name suffix
        encoding: Text encoding of the catalog files
    """

    root_dir: str | Path
    suffix: str = DEFAULT_RESOURCE_SUFFIX
    encoding: str = DEFAULT_ENCODING
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    @staticmethod
    def _validate_base_id(base_id: BaseId) -> None:
        """Validate base_id for path traversal attacks.

        Raises:
            ValueError: If base_id is empty, absolute or contains ".."
        """
        if not base_id or base_id != base_id.strip():
            msg = f"Base ID must be non-empty without surrounding whitespace: {base_id!r}"
            raise ValueError(msg)
        if Path(base_id).is_absolute() or base_id.startswith(("/", "\\")):
            msg = f"Absolute paths not allowed in base_id: '{base_id}'"
            raise ValueError(msg)
        if ".." in base_id:
            msg = f"Path traversal sequences not allowed in base_id: '{base_id}'"
            raise ValueError(msg)

    def _path_for(self, base_id: BaseId, locale_key: LocaleKey) -> Path:
        self._validate_base_id(base_id)
        full_path = (self._resolved_root / resource_name(base_id, locale_key, self.suffix)).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = (
                f"Path traversal detected: resolved path escapes root directory. "
                f"base_id='{base_id}', locale='{locale_key.tag}'"
            )
            raise ValueError(msg) from None
        return full_path

    def describe_path(self, base_id: BaseId, locale_key: LocaleKey) -> str:
        """Return the catalog file path for diagnostics."""
        return str(Path(self.root_dir) / resource_name(base_id, locale_key, self.suffix))

    def try_load(self, base_id: BaseId, locale_key: LocaleKey) -> Catalog | None:
        """Load a catalog file, or return None if it does not exist.

        Raises:
            ValueError: If base_id would escape the root directory
            MalformedEscapeError: If the file contains an invalid \\u escape
            OSError: If the file exists but cannot be read
        """
        path = self._path_for(base_id, locale_key)
        if not path.is_file():
            logger.debug("No catalog at %s", path)
            return None
        with path.open(encoding=self.encoding, newline="") as stream:
            catalog = load(stream)
        logger.debug("Loaded %d entries from %s", len(catalog), path)
        return catalog


@dataclass(frozen=True, slots=True)
class MemoryCatalogLoader:
    """Catalog loader over in-memory sources keyed by resource name.

    Example:
        >>> loader = MemoryCatalogLoader({
        ...     "messages.txt": "greeting=Hello",
        ...     "messages_de.txt": "greeting=Hallo",
        ... })
        >>> loader.try_load("messages", LocaleKey("de"))["greeting"]
        'Hallo'
        >>> loader.try_load("messages", LocaleKey("fr")) is None
        True
    """

    sources: Mapping[str, CatalogSource]
    suffix: str = DEFAULT_RESOURCE_SUFFIX

    def describe_path(self, base_id: BaseId, locale_key: LocaleKey) -> str:
        """Return the resource name that would be looked up."""
        return resource_name(base_id, locale_key, self.suffix)

    def try_load(self, base_id: BaseId, locale_key: LocaleKey) -> Catalog | None:
        """Decode the matching source, or return None if there is none.

        Raises:
            MalformedEscapeError: If the source contains an invalid \\u escape
        """
        source = self.sources.get(resource_name(base_id, locale_key, self.suffix))
        if source is None:
            return None
        return loads(source)
