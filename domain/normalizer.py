"""
SCRIPTURA - Book Name Normalization

Turns a free-form book name ("1st John", "The Epistle to the Romans",
"  Book of *EX*  ") into the lookup key used by the book catalog
("1john", "romans", "ex").

Normalization is a fixed pipeline of pure string-to-string stages:

    collapse_whitespace -> strip_prefix_phrase -> rewrite_ordinal -> strip_non_alphanumeric

The order matters. Prefix phrases are stripped before ordinals are looked
for, and ordinals are rewritten while the space that separates them from
the rest of the name still exists.
"""
from __future__ import annotations

import re
from typing import Dict, Optional

from core.types import NormalizedKey

_WHITESPACE_RE = re.compile(r"\s+")

_PREFIX_PHRASE_RE = re.compile(
    r"^(?:the\s+)?"
    r"(?:(?:book|epistle|gospel|letter)\s+(?:according\s+)?(?:to|for|of)(?:\s+the)?\s*)?"
)

# iii before ii before i, so the longest roman numeral wins
_ORDINAL_RE = re.compile(r"^(first|1st|second|2nd|third|3rd|iii|ii|i)\b", re.ASCII)

ORDINAL_DIGITS: Dict[str, str] = {
    "1st": "1", "first": "1",
    "2nd": "2", "second": "2",
    "3rd": "3", "third": "3",
    "iii": "3", "ii": "2", "i": "1",
}

_NON_ALPHANUMERIC_RE = re.compile(r"[^a-z0-9]")


def collapse_whitespace(text: str) -> str:
    """Trim, collapse whitespace runs to a single space and lowercase."""
    return _WHITESPACE_RE.sub(" ", text.strip()).lower()


def strip_prefix_phrase(text: str) -> str:
    """Drop a leading "the", "book of", "the gospel according to the" etc."""
    return _PREFIX_PHRASE_RE.sub("", text, count=1)


def rewrite_ordinal(text: str) -> str:
    """
    Replace a leading ordinal token with its digit.

    "second kings" -> "2 kings", "iii john" -> "3 john". Only a whole
    leading token is rewritten, so "isaiah" is left alone.
    """
    match = _ORDINAL_RE.match(text)
    if not match:
        return text
    token = match.group(1)
    return ORDINAL_DIGITS[token] + " " + text[len(token):].strip()


def strip_non_alphanumeric(text: str) -> str:
    """Remove every character outside [a-z0-9]."""
    return _NON_ALPHANUMERIC_RE.sub("", text)


def normalize_book_name(name: Optional[str]) -> Optional[NormalizedKey]:
    """
    Normalize a book name or alias into a catalog lookup key.

    Args:
        name: Raw book name, possibly with prefixes, punctuation and mixed case

    Returns:
        Lowercase alphanumeric key with ordinals as leading digits, or None
        when name is None or not a string. Blank strings give "".

    Example:
        >>> normalize_book_name("1st John")
        '1john'
        >>> normalize_book_name("The Epistle to the Romans")
        'romans'
        >>> normalize_book_name("  Book of *EX*  ")
        'ex'
    """
    if not isinstance(name, str):
        return None

    cleaned = collapse_whitespace(name)
    cleaned = strip_prefix_phrase(cleaned)
    cleaned = rewrite_ordinal(cleaned)
    return strip_non_alphanumeric(cleaned)
