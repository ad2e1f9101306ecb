"""
SCRIPTURA - Reference Formatting & Validation Entry Point

Renders structured references as display text and combines parsing,
catalog resolution and bounds checking into a single call.

Usage:
    from domain.formatter import parse_and_validate_reference

    result = parse_and_validate_reference("  GN. Ch 1 , 1 to 3")
    result["formatted"]      # "Genesis 1:1-3"
"""
from __future__ import annotations

from typing import Any, Optional, Tuple, Union

from core.errors import InvalidReferenceError, ReferenceErrorKind
from core.types import ReferenceResult, StructuredReferenceResult
from data.catalog import BookCatalog, get_default_catalog
from domain.parser import parse_bible_reference
from domain.validator import is_valid_reference
from observability.logging import get_logger

logger = get_logger(__name__)

# (canonical name, chapter, verse_start, verse_end)
_Resolved = Tuple[str, int, int, Optional[int]]


def format_reference(
    book: Optional[str] = None,
    chapter: Optional[int] = None,
    verse_start: Optional[int] = None,
    verse_end: Optional[int] = None,
) -> str:
    """
    Render a reference as display text.

    The parts are used as given; nothing is normalized or validated.

    Example:
        >>> format_reference("Genesis", 1, 1, 3)
        'Genesis 1:1-3'
        >>> format_reference("Genesis", 1, 1, 1)
        'Genesis 1:1'
        >>> format_reference("Genesis")
        'Genesis'
    """
    if not book or not chapter:
        return book or ""
    if verse_start is None:
        return f"{book} {chapter}"
    if verse_end is None or verse_end == verse_start:
        return f"{book} {chapter}:{verse_start}"
    return f"{book} {chapter}:{verse_start}-{verse_end}"


def _evaluate(
    reference: Any,
    catalog: Optional[BookCatalog],
) -> Union[ReferenceErrorKind, _Resolved]:
    """Run every check in order; return the first failure or the resolved parts."""
    if not isinstance(reference, str) or not reference.strip():
        return ReferenceErrorKind.EMPTY_INPUT

    parsed = parse_bible_reference(reference)
    if parsed is None or not parsed.book:
        return ReferenceErrorKind.UNPARSABLE_REFERENCE

    if catalog is None:
        catalog = get_default_catalog()

    record = catalog.lookup(parsed.book)
    if record is None:
        return ReferenceErrorKind.UNKNOWN_BOOK

    if parsed.chapter is None or parsed.verse_start is None:
        return ReferenceErrorKind.INCOMPLETE_REFERENCE

    if not is_valid_reference(
        record.name, parsed.chapter, parsed.verse_start, parsed.verse_end, catalog=catalog
    ):
        return ReferenceErrorKind.OUT_OF_RANGE

    return record.name, parsed.chapter, parsed.verse_start, parsed.verse_end


def _success(reference: str, resolved: _Resolved, structured: bool) -> StructuredReferenceResult:
    book, chapter, verse_start, verse_end = resolved
    result: StructuredReferenceResult = {
        "is_valid": True,
        "formatted": format_reference(book, chapter, verse_start, verse_end),
        "error": None,
        "original": reference,
    }
    if structured:
        result.update(
            book=book,
            chapter=chapter,
            verse_start=verse_start,
            verse_end=verse_end,
        )
    return result


def parse_and_validate_reference(
    reference: Any,
    structured: bool = False,
    catalog: Optional[BookCatalog] = None,
) -> ReferenceResult:
    """
    Parse a reference, resolve its book and check its bounds.

    Checks run in a fixed order and the first failure is reported:
    empty input, unparsable reference, unknown book, missing chapter or
    verse, out-of-range chapter or verse.

    Args:
        reference: Raw reference string
        structured: Also return book, chapter, verse_start and verse_end
        catalog: Catalog to resolve against; the default catalog if omitted

    Returns:
        {"is_valid": True, "formatted", "error": None, "original"} on
        success (plus the structured fields when requested), otherwise
        {"is_valid": False, "error", "original"}

    Example:
        >>> parse_and_validate_reference("Genesis Chapter 1 verse 1")["formatted"]
        'Genesis 1:1'
        >>> parse_and_validate_reference("Genesis 99:1")["error"]
        'Invalid chapter or verse'
    """
    outcome = _evaluate(reference, catalog)

    if isinstance(outcome, ReferenceErrorKind):
        logger.debug("reference_rejected", reference=reference, reason=outcome.value)
        return {"is_valid": False, "error": outcome.message, "original": reference}

    return _success(reference, outcome, structured)


def resolve_reference(
    reference: Any,
    catalog: Optional[BookCatalog] = None,
) -> StructuredReferenceResult:
    """
    Strict variant of parse_and_validate_reference.

    Returns:
        The structured success envelope

    Raises:
        InvalidReferenceError: With the kind of the first failed check
    """
    outcome = _evaluate(reference, catalog)

    if isinstance(outcome, ReferenceErrorKind):
        raise InvalidReferenceError(outcome, reference=reference)

    return _success(reference, outcome, structured=True)
