"""Catalog - ordered key/value text resource for one locale.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Iterator, Mapping

__all__ = ["Catalog"]


class Catalog(Mapping[str, str]):
    """Read-only ordered mapping from key to text value.

    Iteration follows first-definition order. Re-defining a key while the
    catalog is being built replaces its value without moving it, which is
    what plain dict assignment does.

    The only mutation after construction is fill_placeholder(), a QA aid
    that overwrites every value so text that never went through the
    catalog stands out.

    Example:
        >>> catalog = Catalog([("title", "Hello"), ("quit", "Bye")])
        >>> list(catalog)
        ['title', 'quit']
        >>> catalog["title"]
        'Hello'
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        self._entries: dict[str, str] = dict(entries)

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"Catalog({self._entries!r})"

    def fill_placeholder(self, placeholder: str) -> None:
        """Replace every value with placeholder.

        Cannot be undone. Must not run concurrently with lookups.

        Args:
            placeholder: Text that replaces every value
        """
        for key in self._entries:
            self._entries[key] = placeholder
