# topmark:header:start
#
#   project      : Lice
#   file         : registry.py
#   file_relpath : src/lice/licenses/registry.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Registry of license entries keyed by slug.

The registry is built explicitly from a sequence of `LicenseEntry` values and
kept ordered by slug, so enumeration is always lexicographic. It holds no global
state: build one at startup (see `default_registry`) and pass it where needed.

Typical usage:
    ```python
    from lice.licenses import default_registry

    registry = default_registry()
    mit = registry.find("mit-expat")
    registry.for_each(lambda lic: print(lic.slug, lic.name))
    ```
"""

from __future__ import annotations

from bisect import bisect_left
from typing import TYPE_CHECKING

from lice.config.logging import get_logger
from lice.errors import DuplicateLicenseError, InvalidLicenseError, UnknownLicenseError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from lice.config.logging import LiceLogger
    from lice.licenses.model import LicenseEntry

logger: LiceLogger = get_logger(__name__)


class LicenseRegistry:
    """Slug-ordered store of license entries."""

    def __init__(self, entries: Iterable[LicenseEntry] = ()) -> None:
        """Initialize the registry with ``entries``.

        Args:
            entries (Iterable[LicenseEntry]): Licenses to register, in any order.

        Raises:
            InvalidLicenseError: If an entry has an empty slug.
            DuplicateLicenseError: If two entries share a slug.
        """
        # Parallel lists ordered by slug.
        self._slugs: list[str] = []
        self._known: list[LicenseEntry] = []
        for entry in entries:
            self.register(entry)

    def _lookup(self, slug: str) -> tuple[int, bool]:
        i = bisect_left(self._slugs, slug)
        return i, i < len(self._slugs) and self._slugs[i] == slug

    def register(self, entry: LicenseEntry) -> None:
        """Record ``entry`` using its slug as key.

        Args:
            entry (LicenseEntry): The license to add.

        Raises:
            InvalidLicenseError: If the slug is empty.
            DuplicateLicenseError: If the slug is already registered; the
                existing entry is kept.
        """
        if not entry.slug:
            raise InvalidLicenseError(f"Empty license slug for {entry.name!r}")
        i, found = self._lookup(entry.slug)
        if found:
            raise DuplicateLicenseError(entry.slug)
        self._slugs.insert(i, entry.slug)
        self._known.insert(i, entry)
        logger.trace("registered license %s", entry.slug)

    def find(self, slug: str) -> LicenseEntry | None:
        """Return the license registered for ``slug``, or None."""
        i, found = self._lookup(slug)
        return self._known[i] if found else None

    def get(self, slug: str) -> LicenseEntry:
        """Return the license registered for ``slug``.

        Raises:
            UnknownLicenseError: If no license has that slug.
        """
        entry = self.find(slug)
        if entry is None:
            raise UnknownLicenseError(slug)
        return entry

    def for_each(self, visitor: Callable[[LicenseEntry], object]) -> None:
        """Call ``visitor`` for each license in lexicographic slug order."""
        for entry in self._known:
            visitor(entry)

    def slugs(self) -> tuple[str, ...]:
        """Return the registered slugs in lexicographic order."""
        return tuple(self._slugs)

    def __iter__(self) -> Iterator[LicenseEntry]:
        return iter(tuple(self._known))

    def __len__(self) -> int:
        return len(self._known)

    def __contains__(self, slug: object) -> bool:
        return isinstance(slug, str) and self._lookup(slug)[1]
