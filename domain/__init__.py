"""
SCRIPTURA - Domain Layer

Reference handling, leaf-first:

    normalizer  - book name -> normalized lookup key
    parser      - reference string -> book text, range text, ParsedReference
    validator   - bounds checks against the book catalog
    formatter   - display text and the parse_and_validate_reference entry point

Only the syntactic layer (normalizer, parser) is re-exported here; it has no
catalog dependency. Import validator and formatter by module path, or use
the top-level scriptura module.

Usage:
    from domain import normalize_book_name, parse_bible_reference
    from domain.formatter import parse_and_validate_reference
"""

from domain.normalizer import (
    ORDINAL_DIGITS,
    collapse_whitespace,
    normalize_book_name,
    rewrite_ordinal,
    strip_non_alphanumeric,
    strip_prefix_phrase,
)
from domain.parser import (
    extract_book_and_range,
    parse_bible_reference,
    parse_chapter_verse,
)

__all__ = [
    # Normalizer
    "normalize_book_name",
    "collapse_whitespace",
    "strip_prefix_phrase",
    "rewrite_ordinal",
    "strip_non_alphanumeric",
    "ORDINAL_DIGITS",
    # Parser
    "extract_book_and_range",
    "parse_chapter_verse",
    "parse_bible_reference",
]
