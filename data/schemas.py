"""
SCRIPTURA - Data Schemas

Normalized schemas for the values passed between the parser, the book
catalog and the validator.
"""
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional, Tuple

from core.types import BookEntryDict


# =============================================================================
# BOOK RECORD - Canonical dataset entry
# =============================================================================

@dataclass(frozen=True)
class BookRecord:
    """
    A canonical book with its aliases and chapter lengths.

    chapters[i] is the verse count of chapter i + 1.

    Example:
    {
        "name": "Ruth",
        "aliases": ("Ru", "Rth"),
        "chapters": (22, 23, 18, 22)
    }
    """
    name: str
    aliases: Tuple[str, ...] = ()
    chapters: Tuple[int, ...] = ()

    @property
    def chapter_count(self) -> int:
        """Number of chapters in the book."""
        return len(self.chapters)

    def verse_count(self, chapter: int) -> Optional[int]:
        """Verse count of a 1-based chapter, or None when out of range."""
        if not isinstance(chapter, int) or isinstance(chapter, bool):
            return None
        if chapter < 1 or chapter > len(self.chapters):
            return None
        return self.chapters[chapter - 1]

    @property
    def names(self) -> Tuple[str, ...]:
        """Canonical name followed by every alias."""
        return (self.name,) + self.aliases

    def to_dict(self) -> BookEntryDict:
        """Convert to the on-disk dataset layout."""
        return BookEntryDict(
            book=self.name,
            aliases=list(self.aliases),
            chapters=list(self.chapters),
        )


# =============================================================================
# PARSE RESULTS - Transient values
# =============================================================================

@dataclass(frozen=True)
class ChapterVerse:
    """Chapter and verse numbers extracted from the range part of a reference."""
    chapter: int
    verse_start: Optional[int] = None
    verse_end: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class ParsedReference:
    """
    Syntactic parse of a reference string, not yet checked against the catalog.

    book holds the normalized key ("2kings"), not the display name.
    """
    book: Optional[str] = None
    chapter: Optional[int] = None
    verse_start: Optional[int] = None
    verse_end: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


# =============================================================================
# CACHE STATISTICS
# =============================================================================

@dataclass
class CacheStats:
    """Counters for the catalog lookup cache."""
    hits: int = 0
    misses: int = 0
    entries: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "entries": self.entries,
            "hit_rate": self.hit_rate,
        }
