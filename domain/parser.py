"""
SCRIPTURA - Reference Parsing

Splits a free-form reference ("  1st   Samuel    17 : 4-9 ") into book text
and range text, tokenizes the range into chapter/verse numbers, and
assembles a ParsedReference with the book as a normalized key.

Parsing is purely syntactic. Nothing here consults the book catalog, and
nothing raises: unusable input yields None or empty fields.
"""
from __future__ import annotations

import re
from typing import List, Optional

from core.types import RawSplit
from data.schemas import ChapterVerse, ParsedReference
from domain.normalizer import normalize_book_name

_WHITESPACE_RE = re.compile(r"\s+")

# Book text runs up to the first chapter marker word or the first digit.
_BOOK_RANGE_RE = re.compile(
    r"^([\w\s.']+?)\s*(?=\b(?:ch(?:apter)?|chap\.?)\b|\d)",
    re.IGNORECASE | re.ASCII,
)

_DASH_RE = re.compile(r"[–—]")
_TO_RE = re.compile(r"\bto\b")
_RANGE_NOISE_RE = re.compile(r"[a-z.,]")
_RANGE_SEPARATOR_RE = re.compile(r"[\s\-:]+")
_LEADING_INTEGER_RE = re.compile(r"^([+-]?\d+)", re.ASCII)


def _clean(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text.strip())


def extract_book_and_range(ref: Optional[str]) -> RawSplit:
    """
    Split a reference into its book text and its chapter/verse text.

    Args:
        ref: Raw reference string

    Returns:
        (book_text, range_text). range_text is "" when the reference has no
        chapter marker or digit; (None, None) for empty or non-string input.

    Example:
        >>> extract_book_and_range("1st John 3:16")
        ('1st John', '3:16')
        >>> extract_book_and_range(" Exodus  Ch. 12. 1 to 3")
        ('Exodus', 'Ch. 12. 1 to 3')
        >>> extract_book_and_range("Genesis")
        ('Genesis', '')
    """
    if not ref or not isinstance(ref, str):
        return None, None

    cleaned = _clean(ref)
    match = _BOOK_RANGE_RE.match(cleaned)
    if match:
        book = match.group(1).strip()
        rest = cleaned[match.end():].strip()
        return book, rest
    return cleaned, ""


def _range_numbers(text: str) -> List[int]:
    cleaned = text.lower()
    cleaned = _DASH_RE.sub("-", cleaned)
    cleaned = _TO_RE.sub("-", cleaned)
    cleaned = _RANGE_NOISE_RE.sub("", cleaned)
    cleaned = _clean(cleaned)

    numbers = []
    for token in _RANGE_SEPARATOR_RE.split(cleaned):
        match = _LEADING_INTEGER_RE.match(token)
        if match:
            numbers.append(int(match.group(1)))
    return numbers


def parse_chapter_verse(text: Optional[str]) -> Optional[ChapterVerse]:
    """
    Extract chapter, start verse and end verse from range text.

    Letters, periods and commas are dropped; "to" and en/em dashes act as
    hyphens. One number gives a chapter, two add the start verse, three add
    the end verse. Numbers past the third are ignored. A token counts by its
    leading, optionally signed, digits ("+3" gives 3).

    Returns:
        ChapterVerse, or None when the text is empty or holds no number

    Example:
        >>> parse_chapter_verse("Chapter 13 Verses 4–7")
        ChapterVerse(chapter=13, verse_start=4, verse_end=7)
        >>> parse_chapter_verse("nonsense") is None
        True
    """
    if not text or not isinstance(text, str):
        return None

    numbers = _range_numbers(text)
    if not numbers:
        return None
    if len(numbers) == 1:
        return ChapterVerse(chapter=numbers[0])
    if len(numbers) == 2:
        return ChapterVerse(chapter=numbers[0], verse_start=numbers[1])
    return ChapterVerse(chapter=numbers[0], verse_start=numbers[1], verse_end=numbers[2])


def parse_bible_reference(ref: Optional[str]) -> Optional[ParsedReference]:
    """
    Parse a reference string into a normalized key and chapter/verse numbers.

    Args:
        ref: Raw reference such as " Iii JohN  Chap. 1 verses 9 to  11"

    Returns:
        ParsedReference whose book is a normalized key, or None for empty or
        non-string input. When no book text survives normalization every
        field is None.

    Example:
        >>> parse_bible_reference("2nd Kings 4:2")
        ParsedReference(book='2kings', chapter=4, verse_start=2, verse_end=None)
        >>> parse_bible_reference("!!!")
        ParsedReference(book=None, chapter=None, verse_start=None, verse_end=None)
    """
    if not ref or not isinstance(ref, str):
        return None

    book_text, range_text = extract_book_and_range(_clean(ref))
    book = normalize_book_name(book_text) if book_text else None
    if not book:
        return ParsedReference()

    chapter_verse = parse_chapter_verse(range_text) if range_text else None
    if chapter_verse is None:
        return ParsedReference(book=book)

    return ParsedReference(
        book=book,
        chapter=chapter_verse.chapter,
        verse_start=chapter_verse.verse_start,
        verse_end=chapter_verse.verse_end,
    )
