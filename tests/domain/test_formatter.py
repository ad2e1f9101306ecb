"""
Tests for domain/formatter.py - Formatting and the validation entry point.

Covers:
- format_reference rendering rules
- parse_and_validate_reference check order and envelopes
- resolve_reference strict variant
"""
import pytest

from core.errors import InvalidReferenceError, ReferenceErrorKind
from domain.formatter import format_reference, parse_and_validate_reference, resolve_reference


# =============================================================================
# format_reference
# =============================================================================

class TestFormatReference:
    """Tests for format_reference."""

    @pytest.mark.parametrize("parts,expected", [
        ((), ""),
        ((None, 1, 1, 2), ""),
        (("Genesis",), "Genesis"),
        (("Genesis", None, 3), "Genesis"),
        (("Genesis", 1), "Genesis 1"),
        (("Genesis", 1, 1), "Genesis 1:1"),
        (("Genesis", 1, 1, 1), "Genesis 1:1"),
        (("Genesis", 1, 1, 3), "Genesis 1:1-3"),
        (("Song of Solomon", 2, 4, 9), "Song of Solomon 2:4-9"),
    ])
    def test_renders(self, parts, expected):
        assert format_reference(*parts) == expected

    def test_keyword_arguments(self):
        assert format_reference(book="Ruth", chapter=2, verse_start=3) == "Ruth 2:3"

    def test_input_is_not_normalized(self):
        assert format_reference("gen", 1, 1) == "gen 1:1"


# =============================================================================
# parse_and_validate_reference
# =============================================================================

@pytest.mark.scenario
class TestScenarios:
    """Reference strings checked end to end against the packaged catalog."""

    def test_chapter_and_verse_words(self):
        assert parse_and_validate_reference("Genesis Chapter 1 verse 1") == {
            "is_valid": True,
            "formatted": "Genesis 1:1",
            "error": None,
            "original": "Genesis Chapter 1 verse 1",
        }

    def test_abbreviation_with_range(self):
        assert parse_and_validate_reference("  GN. Ch 1 , 1 to 3") == {
            "is_valid": True,
            "formatted": "Genesis 1:1-3",
            "error": None,
            "original": "  GN. Ch 1 , 1 to 3",
        }

    def test_unknown_book(self):
        assert parse_and_validate_reference("Book of Judas 1:1") == {
            "is_valid": False,
            "error": "Invalid book name",
            "original": "Book of Judas 1:1",
        }

    def test_chapter_out_of_range(self):
        assert parse_and_validate_reference("Genesis 99:1") == {
            "is_valid": False,
            "error": "Invalid chapter or verse",
            "original": "Genesis 99:1",
        }

    def test_structured(self):
        assert parse_and_validate_reference("gEnEsIs 1 verse 1", structured=True) == {
            "is_valid": True,
            "book": "Genesis",
            "chapter": 1,
            "verse_start": 1,
            "verse_end": None,
            "formatted": "Genesis 1:1",
            "error": None,
            "original": "gEnEsIs 1 verse 1",
        }

    def test_empty(self):
        assert parse_and_validate_reference("") == {
            "is_valid": False,
            "error": "Empty or invalid input",
            "original": "",
        }


class TestParseAndValidateReference:
    """Tests for check order and envelope shape."""

    @pytest.mark.parametrize("reference", [None, 42, "   ", "\n\t", ["Genesis 1:1"]])
    def test_empty_or_invalid_input(self, catalog, reference):
        result = parse_and_validate_reference(reference, catalog=catalog)
        assert result == {"is_valid": False, "error": "Empty or invalid input", "original": reference}

    @pytest.mark.parametrize("reference", ["!!!", "--- ..."])
    def test_could_not_parse(self, catalog, reference):
        result = parse_and_validate_reference(reference, catalog=catalog)
        assert result["error"] == "Could not parse reference"

    def test_embedded_numeral_is_an_unknown_book(self, catalog):
        result = parse_and_validate_reference("1 Ch 1:1", catalog=catalog)
        assert result["error"] == "Invalid book name"

    @pytest.mark.parametrize("reference", ["Genesis", "Genesis 1", "Genesis chapter 3"])
    def test_missing_chapter_or_verse(self, catalog, reference):
        result = parse_and_validate_reference(reference, catalog=catalog)
        assert result["error"] == "Missing chapter or verse"

    def test_unknown_book_reported_before_missing_verse(self, catalog):
        result = parse_and_validate_reference("Judas", catalog=catalog)
        assert result["error"] == "Invalid book name"

    @pytest.mark.parametrize("reference", ["Genesis 1:32", "Genesis 1:0", "Genesis 1:5-3", "Jude 2:1"])
    def test_invalid_chapter_or_verse(self, catalog, reference):
        result = parse_and_validate_reference(reference, catalog=catalog)
        assert result["error"] == "Invalid chapter or verse"

    @pytest.mark.parametrize("reference,formatted", [
        ("2nd Kings 4:2", "2 Kings 4:2"),
        (" Iii JohN  Chap. 1 verses 9 to  11", "3 John 1:9-11"),
        ("The Epistle to the Romans 8:28", "Romans 8:28"),
        ("Ps 119:176", "Psalms 119:176"),
        ("Song of Songs 2:4", "Song of Solomon 2:4"),
        ("Genesis 1:5-5", "Genesis 1:5"),
        ("First John 1:1–3", "1 John 1:1-3"),
        ("Ps 1:1-+2", "Psalms 1:1-2"),
        ("Genesis 1:+3", "Genesis 1:3"),
    ])
    def test_formats_valid_references(self, catalog, reference, formatted):
        result = parse_and_validate_reference(reference, catalog=catalog)
        assert result["is_valid"] is True
        assert result["formatted"] == formatted

    def test_failure_has_no_formatted_field(self, catalog):
        result = parse_and_validate_reference("Genesis 99:1", catalog=catalog)
        assert "formatted" not in result
        assert set(result) == {"is_valid", "error", "original"}

    def test_structured_failure_has_no_structured_fields(self, catalog):
        result = parse_and_validate_reference("Genesis 99:1", structured=True, catalog=catalog)
        assert set(result) == {"is_valid", "error", "original"}

    def test_unstructured_success_keys(self, catalog):
        result = parse_and_validate_reference("Ruth 1:1", catalog=catalog)
        assert set(result) == {"is_valid", "formatted", "error", "original"}

    def test_structured_uses_canonical_name(self, catalog):
        result = parse_and_validate_reference("1st sam 17:4-9", structured=True, catalog=catalog)
        assert result["book"] == "1 Samuel"
        assert (result["chapter"], result["verse_start"], result["verse_end"]) == (17, 4, 9)

    def test_custom_catalog(self, small_catalog):
        result = parse_and_validate_reference("Second Beta 1:2-4", structured=True, catalog=small_catalog)
        assert result["is_valid"] is True
        assert result["book"] == "2 Beta"
        assert result["formatted"] == "2 Beta 1:2-4"
        assert parse_and_validate_reference("Genesis 1:1", catalog=small_catalog)["error"] == "Invalid book name"


# =============================================================================
# resolve_reference
# =============================================================================

class TestResolveReference:
    """Tests for the raising variant."""

    def test_returns_structured_envelope(self, catalog):
        result = resolve_reference("Ruth 2:3", catalog=catalog)
        assert result["is_valid"] is True
        assert result["book"] == "Ruth"
        assert result["formatted"] == "Ruth 2:3"

    @pytest.mark.parametrize("reference,kind", [
        ("", ReferenceErrorKind.EMPTY_INPUT),
        ("!!!", ReferenceErrorKind.UNPARSABLE_REFERENCE),
        ("Judas 1:1", ReferenceErrorKind.UNKNOWN_BOOK),
        ("Genesis 1", ReferenceErrorKind.INCOMPLETE_REFERENCE),
        ("Genesis 99:1", ReferenceErrorKind.OUT_OF_RANGE),
    ])
    def test_raises_with_kind(self, catalog, reference, kind):
        with pytest.raises(InvalidReferenceError) as exc_info:
            resolve_reference(reference, catalog=catalog)

        assert exc_info.value.kind is kind
        assert exc_info.value.message == kind.message
        assert exc_info.value.reference == reference
