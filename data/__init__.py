"""
SCRIPTURA - Data Module

The canonical book dataset and the catalog built from it.

Architecture:
- schemas.py: Frozen dataclasses passed between parser, catalog and validator
- loaders.py: JSON dataset loading with Pydantic entry validation
- catalog.py: BookCatalog with memoized lookup and the default instance
- bible_counts.json: 66-book canon with aliases and per-chapter verse counts
"""

# =============================================================================
# SCHEMAS - Dataclass definitions
# =============================================================================
from data.schemas import (
    BookRecord,
    ChapterVerse,
    ParsedReference,
    CacheStats,
)

# =============================================================================
# LOADERS - Dataset access
# =============================================================================
from data.loaders import (
    DEFAULT_DATA_PATH,
    BookEntry,
    load_book_records,
    parse_book_entries,
)

# =============================================================================
# CATALOG - Book lookup
# =============================================================================
from data.catalog import (
    BookCatalog,
    get_default_catalog,
    set_default_catalog,
    reset_default_catalog,
    get_book,
    get_chapter_count,
    get_verse_count,
    list_bible_books,
    list_aliases,
    list_chapters,
    list_verses,
)

__all__ = [
    # Schemas
    "BookRecord",
    "ChapterVerse",
    "ParsedReference",
    "CacheStats",
    # Loaders
    "DEFAULT_DATA_PATH",
    "BookEntry",
    "load_book_records",
    "parse_book_entries",
    # Catalog
    "BookCatalog",
    "get_default_catalog",
    "set_default_catalog",
    "reset_default_catalog",
    "get_book",
    "get_chapter_count",
    "get_verse_count",
    "list_bible_books",
    "list_aliases",
    "list_chapters",
    "list_verses",
]
