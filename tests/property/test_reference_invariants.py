"""
Property-Based Tests for Reference Handling

Invariants of name resolution, bounds checking, formatting and parsing,
checked against the packaged catalog.
"""
import pytest
from hypothesis import example, given, settings, strategies as st

from core.errors import ReferenceErrorKind
from domain.formatter import format_reference, parse_and_validate_reference
from domain.normalizer import normalize_book_name
from domain.parser import parse_bible_reference
from domain.validator import is_valid_reference
from tests.property.strategies import (
    ALL_NAMES,
    BOOKS,
    ORDINAL_SPELLINGS,
    book_name_variant,
    book_strategy,
    in_range_reference,
    reference_text,
)

pytestmark = pytest.mark.property

ERROR_MESSAGES = {kind.message for kind in ReferenceErrorKind}


# =============================================================================
# Name resolution
# =============================================================================

class TestNameResolution:
    """Aliases and spellings resolve to the same record as the canonical name."""

    @pytest.mark.parametrize("record,name", ALL_NAMES, ids=lambda value: str(getattr(value, "name", value)))
    def test_every_alias_resolves_to_its_book(self, catalog, record, name):
        assert catalog.lookup(name) is catalog.lookup(record.name)
        assert catalog.lookup(name).name == record.name

    @given(book_name_variant())
    @settings(max_examples=300)
    def test_spelling_variants_resolve(self, catalog, variant):
        record, spelling = variant
        assert catalog.lookup(spelling) is catalog.lookup(record.name)

    @given(book_name_variant())
    @settings(max_examples=300)
    def test_normalization_is_idempotent(self, variant):
        _, spelling = variant
        key = normalize_book_name(spelling)
        assert normalize_book_name(key) == key

    @given(st.sampled_from(sorted(ORDINAL_SPELLINGS)), st.sampled_from(["John", "Kings", "Samuel", "Corinthians"]))
    def test_ordinal_spellings_are_equivalent(self, number, book):
        keys = {normalize_book_name(f"{spelling} {book}") for spelling in ORDINAL_SPELLINGS[number]}
        assert keys == {f"{number}{book.lower()}"}

    @given(st.text(max_size=60))
    @example("")
    @example("   ")
    @example("1st")
    @example("the book of")
    def test_normalize_always_gives_alphanumeric_key(self, text):
        key = normalize_book_name(text)
        assert isinstance(key, str)
        assert all(c.isascii() and (c.isdigit() or c.islower()) for c in key)


# =============================================================================
# Bounds
# =============================================================================

class TestBounds:
    """In-range references are valid; the first value past each bound is not."""

    @given(in_range_reference())
    @settings(max_examples=300)
    def test_in_range_is_valid(self, catalog, reference):
        record, chapter, verse_start, verse_end = reference
        assert is_valid_reference(record.name, chapter, verse_start, verse_end, catalog=catalog)

    @given(book_strategy(), st.data())
    @settings(max_examples=200)
    def test_past_last_verse_is_invalid(self, catalog, record, data):
        chapter = data.draw(st.integers(min_value=1, max_value=record.chapter_count))
        verses = record.verse_count(chapter)
        assert not is_valid_reference(record.name, chapter, verses + 1, catalog=catalog)
        assert not is_valid_reference(record.name, chapter, 1, verses + 1, catalog=catalog)

    @pytest.mark.parametrize("record", BOOKS, ids=lambda record: record.name)
    def test_past_last_chapter_is_invalid(self, catalog, record):
        assert is_valid_reference(record.name, record.chapter_count, 1, catalog=catalog)
        assert not is_valid_reference(record.name, record.chapter_count + 1, 1, catalog=catalog)


# =============================================================================
# Round trip
# =============================================================================

class TestRoundTrip:
    """Formatting then parsing recovers the reference."""

    @given(in_range_reference())
    @settings(max_examples=300)
    def test_parse_of_format(self, catalog, reference):
        record, chapter, verse_start, verse_end = reference
        parsed = parse_bible_reference(format_reference(record.name, chapter, verse_start, verse_end))

        assert catalog.lookup(parsed.book) is catalog.lookup(record.name)
        assert (parsed.chapter, parsed.verse_start, parsed.verse_end) == (chapter, verse_start, verse_end)

    @given(reference_text())
    @settings(max_examples=300)
    def test_free_form_references_validate(self, catalog, generated):
        record, text, chapter, verse_start, verse_end = generated
        result = parse_and_validate_reference(text, structured=True, catalog=catalog)

        assert result["is_valid"] is True, result
        assert result["book"] == record.name
        assert (result["chapter"], result["verse_start"], result["verse_end"]) == (chapter, verse_start, verse_end)
        assert result["formatted"] == format_reference(record.name, chapter, verse_start, verse_end)


# =============================================================================
# Robustness
# =============================================================================

class TestRobustness:
    """Arbitrary input never raises and always yields a well-formed envelope."""

    @given(st.one_of(st.text(max_size=80), st.none(), st.integers(), st.lists(st.text(max_size=5))))
    @settings(max_examples=300)
    def test_never_raises(self, catalog, reference):
        result = parse_and_validate_reference(reference, catalog=catalog)

        assert result["original"] is reference
        if result["is_valid"]:
            assert result["error"] is None
            assert isinstance(result["formatted"], str)
        else:
            assert result["error"] in ERROR_MESSAGES
            assert "formatted" not in result
