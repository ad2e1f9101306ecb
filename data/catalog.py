"""
SCRIPTURA - Book Catalog

Holds the ordered list of canonical book records and resolves free-form
book names and aliases to them.

Lookups normalize their input and memoize the outcome per normalized key,
misses included. The memo is a pure function of its key, so concurrent
readers are safe; the check-then-insert sequence runs under a lock so that
racing threads do not repeat the scan.

Usage:
    from data.catalog import get_default_catalog

    catalog = get_default_catalog()
    catalog.lookup("2nd Kings").name      # "2 Kings"
    catalog.verse_count("Gen", 1)         # 31
"""
import threading
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Union

from core.errors import ErrorContext, ScripturaDataError
from core.types import NormalizedKey
from data.loaders import load_book_records
from data.schemas import BookRecord, CacheStats
from domain.normalizer import normalize_book_name
from observability.logging import get_logger

logger = get_logger(__name__)


class BookCatalog:
    """
    Ordered, immutable collection of BookRecords with memoized name lookup.

    Record order is significant: when two records share a normalized key the
    first one wins.
    """

    def __init__(self, records: Sequence[BookRecord], cache_enabled: bool = True):
        self._records: tuple = tuple(records)
        self._cache: Dict[NormalizedKey, Optional[BookRecord]] = {}
        self._lock = threading.RLock()
        self._stats = CacheStats()
        self.cache_enabled = cache_enabled

    @classmethod
    def from_file(
        cls,
        path: Optional[Union[str, Path]] = None,
        strict: bool = True,
        cache_enabled: bool = True,
    ) -> "BookCatalog":
        """
        Load a catalog from a dataset file.

        Args:
            path: Dataset JSON file. Defaults to the packaged dataset.
            strict: Reject datasets where two books share a normalized key
            cache_enabled: Memoize lookups

        Raises:
            ScripturaDataError: If the dataset cannot be loaded, or strict is
                set and keys collide
        """
        catalog = cls(load_book_records(path), cache_enabled=cache_enabled)

        if strict:
            collisions = catalog.find_key_collisions()
            if collisions:
                raise ScripturaDataError(
                    f"{len(collisions)} normalized key(s) shared by more than one book",
                    path=str(path) if path is not None else None,
                    context=ErrorContext(
                        operation="from_file",
                        component="data.catalog",
                        metadata={"collisions": collisions},
                    ),
                )

        logger.info("catalog_loaded", books=len(catalog), strict=strict)
        return catalog

    # ------------------------------------------------------------------
    # Collection protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[BookRecord]:
        return iter(self._records)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    @property
    def records(self) -> tuple:
        """Records in dataset order."""
        return self._records

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, name: Optional[str]) -> Optional[BookRecord]:
        """
        Resolve a book name, alias or normalized key to its record.

        Returns None when the name is missing or matches no book.
        """
        key = normalize_book_name(name)
        if key is None:
            return None

        if not self.cache_enabled:
            return self._scan(key)

        with self._lock:
            if key in self._cache:
                self._stats.hits += 1
                return self._cache[key]

            self._stats.misses += 1
            record = self._scan(key)
            self._cache[key] = record
            self._stats.entries = len(self._cache)

        if record is None:
            logger.debug("book_lookup_miss", key=key)
        return record

    get_book = lookup

    def _scan(self, key: NormalizedKey) -> Optional[BookRecord]:
        for record in self._records:
            if normalize_book_name(record.name) == key:
                return record
            for alias in record.aliases:
                if normalize_book_name(alias) == key:
                    return record
        return None

    def chapter_count(self, name: Optional[str]) -> Optional[int]:
        """Number of chapters in the book, or None if the book is unknown."""
        record = self.lookup(name)
        return record.chapter_count if record else None

    def verse_count(self, name: Optional[str], chapter: Optional[int]) -> Optional[int]:
        """Verse count of a chapter, or None for an unknown book or chapter."""
        record = self.lookup(name)
        if record is None:
            return None
        return record.verse_count(chapter)

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_books(self) -> List[str]:
        """Canonical book names in dataset order."""
        return [record.name for record in self._records]

    def list_aliases(self, name: Optional[str], normalized: bool = False) -> Optional[List[str]]:
        """
        Canonical name followed by every alias of the book.

        Args:
            name: Any name or alias of the book
            normalized: Return normalized keys instead of display text
        """
        record = self.lookup(name)
        if record is None:
            return None
        names = list(record.names)
        if normalized:
            return [normalize_book_name(n) for n in names]
        return names

    def list_chapters(self, name: Optional[str]) -> Optional[List[int]]:
        """Chapter numbers 1..n of the book."""
        count = self.chapter_count(name)
        if count is None:
            return None
        return list(range(1, count + 1))

    def list_verses(self, name: Optional[str], chapter: Optional[int] = None) -> Optional[List[int]]:
        """Verse numbers 1..n of a chapter."""
        count = self.verse_count(name, chapter)
        if count is None:
            return None
        return list(range(1, count + 1))

    # ------------------------------------------------------------------
    # Integrity & cache management
    # ------------------------------------------------------------------

    def find_key_collisions(self) -> Dict[NormalizedKey, List[str]]:
        """Normalized keys claimed by more than one book, with the books' names."""
        owners: Dict[NormalizedKey, List[str]] = defaultdict(list)
        for record in self._records:
            for name in record.names:
                key = normalize_book_name(name)
                if record.name not in owners[key]:
                    owners[key].append(record.name)
        return {key: books for key, books in owners.items() if len(books) > 1}

    def clear_cache(self) -> None:
        """Drop every memoized lookup and reset the counters."""
        with self._lock:
            self._cache.clear()
            self._stats = CacheStats()

    @property
    def cache_stats(self) -> CacheStats:
        """Snapshot of the lookup cache counters."""
        with self._lock:
            return CacheStats(
                hits=self._stats.hits,
                misses=self._stats.misses,
                entries=self._stats.entries,
            )


# =============================================================================
# DEFAULT CATALOG - Process-wide instance loaded from configuration
# =============================================================================

_default_catalog: Optional[BookCatalog] = None
_default_catalog_lock = threading.Lock()


def get_default_catalog() -> BookCatalog:
    """Get or load the process-wide catalog described by the configuration."""
    global _default_catalog
    if _default_catalog is None:
        with _default_catalog_lock:
            if _default_catalog is None:
                from config import get_config

                catalog_config = get_config().catalog
                _default_catalog = BookCatalog.from_file(
                    catalog_config.data_path,
                    strict=catalog_config.strict,
                    cache_enabled=catalog_config.cache_enabled,
                )
    return _default_catalog


def set_default_catalog(catalog: Optional[BookCatalog]) -> None:
    """Install a catalog as the process-wide default (None to unset)."""
    global _default_catalog
    with _default_catalog_lock:
        _default_catalog = catalog


def reset_default_catalog() -> None:
    """Forget the process-wide catalog; the next access reloads it."""
    set_default_catalog(None)


# =============================================================================
# MODULE-LEVEL HELPERS - Delegate to the default catalog
# =============================================================================

def get_book(name: Optional[str]) -> Optional[BookRecord]:
    """Record for a book name or alias, or None."""
    return get_default_catalog().lookup(name)


def get_chapter_count(name: Optional[str]) -> Optional[int]:
    """Number of chapters in the book, or None."""
    return get_default_catalog().chapter_count(name)


def get_verse_count(name: Optional[str], chapter: Optional[int]) -> Optional[int]:
    """Number of verses in the chapter, or None."""
    return get_default_catalog().verse_count(name, chapter)


def list_bible_books() -> List[str]:
    """Canonical book names in canonical order."""
    return get_default_catalog().list_books()


def list_aliases(name: Optional[str], normalized: bool = False) -> Optional[List[str]]:
    """Canonical name and aliases of a book, or None."""
    return get_default_catalog().list_aliases(name, normalized=normalized)


def list_chapters(name: Optional[str]) -> Optional[List[int]]:
    """Chapter numbers of a book, or None."""
    return get_default_catalog().list_chapters(name)


def list_verses(name: Optional[str], chapter: Optional[int] = None) -> Optional[List[int]]:
    """Verse numbers of a chapter, or None."""
    return get_default_catalog().list_verses(name, chapter)
