"""
SCRIPTURA - Reference Validation

Bounds checks against the book catalog. Every check returns a bool; an
argument of the wrong type is simply invalid.
"""
from __future__ import annotations

from typing import Any, Optional

from data.catalog import BookCatalog, get_default_catalog
from data.schemas import BookRecord


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _resolve(book: Any, catalog: Optional[BookCatalog]) -> Optional[BookRecord]:
    if not isinstance(book, str):
        return None
    if catalog is None:
        catalog = get_default_catalog()
    return catalog.lookup(book)


def is_valid_book(book: Any, catalog: Optional[BookCatalog] = None) -> bool:
    """Check that a name, alias or normalized key resolves to a book."""
    return _resolve(book, catalog) is not None


def is_valid_chapter(book: Any, chapter: Any, catalog: Optional[BookCatalog] = None) -> bool:
    """
    Check that the book exists and has the chapter.

    Args:
        book: Book name, alias or normalized key
        chapter: 1-based chapter number
        catalog: Catalog to check against; the default catalog if omitted

    Returns:
        True if 1 <= chapter <= number of chapters
    """
    record = _resolve(book, catalog)
    if record is None or not _is_int(chapter):
        return False
    return 1 <= chapter <= record.chapter_count


def is_valid_reference(
    book: Any,
    chapter: Any,
    verse_start: Any,
    verse_end: Any = None,
    catalog: Optional[BookCatalog] = None,
) -> bool:
    """
    Check that a chapter and verse range lie within the book.

    Args:
        book: Book name, alias or normalized key
        chapter: 1-based chapter number
        verse_start: First verse
        verse_end: Last verse, or None for a single verse
        catalog: Catalog to check against; the default catalog if omitted

    Returns:
        True if the chapter exists, 1 <= verse_start <= verses in chapter and,
        when given, verse_start <= verse_end <= verses in chapter
    """
    record = _resolve(book, catalog)
    if record is None or not _is_int(chapter):
        return False

    max_verses = record.verse_count(chapter)
    if max_verses is None:
        return False

    if not _is_int(verse_start) or verse_start < 1 or verse_start > max_verses:
        return False

    if verse_end is not None:
        if not _is_int(verse_end) or verse_end < verse_start or verse_end > max_verses:
            return False

    return True
