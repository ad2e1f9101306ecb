"""
SCRIPTURA - Data Loaders

Reads the canonical book dataset (an ordered JSON list of
{"book", "aliases", "chapters"} entries), validates every entry with
Pydantic and builds immutable BookRecord values from it.
"""
import json
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.errors import ErrorContext, ScripturaDataError
from data.schemas import BookRecord
from observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DATA_PATH = Path(__file__).parent / "bible_counts.json"


class BookEntry(BaseModel):
    """Schema of one dataset entry."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    book: str = Field(min_length=1, description="Canonical display name")
    aliases: List[str] = Field(default_factory=list, description="Alternate names and abbreviations")
    chapters: List[int] = Field(min_length=1, description="Verse count of each chapter, in order")

    @field_validator("book", mode="before")
    @classmethod
    def strip_book(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("aliases")
    @classmethod
    def aliases_not_blank(cls, value: List[str]) -> List[str]:
        for alias in value:
            if not alias.strip():
                raise ValueError("aliases must not be blank")
        return value

    @field_validator("chapters")
    @classmethod
    def chapters_positive(cls, value: List[int]) -> List[int]:
        for index, count in enumerate(value, start=1):
            if count < 1:
                raise ValueError(f"chapter {index} has {count} verses; expected at least 1")
        return value

    def to_record(self) -> BookRecord:
        """Convert to an immutable BookRecord."""
        return BookRecord(
            name=self.book,
            aliases=tuple(self.aliases),
            chapters=tuple(self.chapters),
        )


def parse_book_entries(entries: Iterable[Any], source: Optional[str] = None) -> List[BookRecord]:
    """
    Validate raw dataset entries and convert them to BookRecords.

    Args:
        entries: Sequence of dicts in dataset layout
        source: Where the entries came from, for error reporting

    Returns:
        Records in dataset order

    Raises:
        ScripturaDataError: If an entry does not match the schema
    """
    records: List[BookRecord] = []
    for index, entry in enumerate(entries):
        try:
            records.append(BookEntry.model_validate(entry).to_record())
        except ValidationError as e:
            raise ScripturaDataError(
                f"Invalid book entry at index {index}",
                path=source,
                entry_index=index,
                context=ErrorContext(
                    operation="parse_book_entries",
                    component="data.loaders",
                    source=source,
                    metadata={"errors": e.errors(include_url=False)},
                ),
                cause=e,
            ) from e
    return records


def load_book_records(path: Optional[Union[str, Path]] = None) -> List[BookRecord]:
    """
    Load and validate the book dataset from a JSON file.

    Args:
        path: Dataset file. Defaults to the packaged bible_counts.json.

    Returns:
        Records in dataset order

    Raises:
        ScripturaDataError: If the file is missing, is not valid JSON, is not
            a non-empty list, or contains an invalid entry
    """
    data_path = Path(path) if path is not None else DEFAULT_DATA_PATH

    try:
        with open(data_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise ScripturaDataError(
            f"Book dataset not found: {data_path}",
            path=str(data_path),
            cause=e,
            suggestions=["Set SCRIPTURA_DATA_PATH to an existing JSON file"],
        ) from e
    except json.JSONDecodeError as e:
        raise ScripturaDataError(
            f"Book dataset is not valid JSON: {data_path}",
            path=str(data_path),
            cause=e,
        ) from e

    if not isinstance(raw, list) or not raw:
        raise ScripturaDataError(
            f"Book dataset must be a non-empty JSON list: {data_path}",
            path=str(data_path),
        )

    records = parse_book_entries(raw, source=str(data_path))
    logger.debug("book_records_loaded", path=str(data_path), books=len(records))
    return records
