"""
SCRIPTURA - Centralized Type Definitions

Provides type aliases and TypedDicts for consistent typing throughout the
system.

Usage:
    from core.types import NormalizedKey, ReferenceResult

    def lookup(key: NormalizedKey) -> Optional[BookRecord]:
        ...
"""
from __future__ import annotations

from typing import List, Optional, Tuple, TypedDict

# =============================================================================
# TYPE ALIASES - Simple type shortcuts
# =============================================================================

# Lowercase ASCII letters and digits only, e.g. "1john", "songofsolomon"
NormalizedKey = str

# Canonical display name, e.g. "Song of Solomon"
BookName = str

# (book text, chapter/verse text) as split from a raw reference
RawSplit = Tuple[Optional[str], Optional[str]]


# =============================================================================
# TYPED DICTS - Structured dictionaries with type hints
# =============================================================================


class BookEntryDict(TypedDict):
    """One record of the book dataset as stored on disk."""
    book: str
    aliases: List[str]
    chapters: List[int]


class ReferenceResult(TypedDict, total=False):
    """Envelope returned by parse_and_validate_reference."""
    is_valid: bool
    formatted: str
    error: Optional[str]
    original: object


class StructuredReferenceResult(ReferenceResult, total=False):
    """Envelope returned when structured output is requested."""
    book: BookName
    chapter: int
    verse_start: Optional[int]
    verse_end: Optional[int]
