"""
SCRIPTURA - Scripture Reference Parsing and Validation

Parses free-form references ("2nd Kings 4:2", "GN. Ch 1, 1 to 3") into book,
chapter and verse numbers, checks them against the canonical table of book
lengths, and renders them back as display text.

Usage:
    from scriptura import parse_and_validate_reference, list_chapters

    parse_and_validate_reference("  GN. Ch 1 , 1 to 3")
    # {'is_valid': True, 'formatted': 'Genesis 1:1-3', 'error': None,
    #  'original': '  GN. Ch 1 , 1 to 3'}

    parse_and_validate_reference("gEnEsIs 1 verse 1", structured=True)["book"]
    # 'Genesis'

    list_chapters("Ruth")
    # [1, 2, 3, 4]
"""

from core.errors import (
    InvalidReferenceError,
    ReferenceErrorKind,
    ScripturaConfigError,
    ScripturaDataError,
    ScripturaError,
)
from data.catalog import (
    BookCatalog,
    get_book,
    get_chapter_count,
    get_default_catalog,
    get_verse_count,
    list_aliases,
    list_bible_books,
    list_chapters,
    list_verses,
    reset_default_catalog,
    set_default_catalog,
)
from data.schemas import BookRecord, ChapterVerse, ParsedReference
from domain.formatter import format_reference, parse_and_validate_reference, resolve_reference
from domain.normalizer import normalize_book_name
from domain.parser import extract_book_and_range, parse_bible_reference, parse_chapter_verse
from domain.validator import is_valid_book, is_valid_chapter, is_valid_reference

__version__ = "1.0.0"

__all__ = [
    # Entry points
    "parse_and_validate_reference",
    "resolve_reference",
    "format_reference",
    # Parsing
    "normalize_book_name",
    "extract_book_and_range",
    "parse_chapter_verse",
    "parse_bible_reference",
    # Validation
    "is_valid_book",
    "is_valid_chapter",
    "is_valid_reference",
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
    # Values
    "BookRecord",
    "ChapterVerse",
    "ParsedReference",
    # Errors
    "ScripturaError",
    "ScripturaConfigError",
    "ScripturaDataError",
    "InvalidReferenceError",
    "ReferenceErrorKind",
]
