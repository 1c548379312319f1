"""Tests for rname.metadata.utils and rname.metadata.models helpers."""

import pytest

from rname.core.errors import EmptyQueryError
from rname.metadata.models import MediaMetadata, MediaMetadataType, extract_year
from rname.metadata.utils import require_query, split_year_hint


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("The Thing y:1982", ("The Thing", "1982")),
        ("Y:1982 The Thing", ("The Thing", "1982")),
        ("The Thing", ("The Thing", None)),
        ("Up y:2009 y:1999", ("Up  y:1999", "2009")),
        ("Alien y:19", ("Alien y:19", None)),
    ],
)
def test_split_year_hint(query: str, expected: tuple[str, str | None]) -> None:
    """The first y:YYYY hint is removed and returned."""
    assert split_year_hint(query) == expected


@pytest.mark.parametrize("query", ["", "   ", "y:1982", " y:2001 "])
def test_empty_query(query: str) -> None:
    """A query with no search text left raises EmptyQueryError."""
    with pytest.raises(EmptyQueryError, match="Empty search query"):
        split_year_hint(query)


def test_require_query_trims() -> None:
    """Surrounding whitespace is removed."""
    assert require_query("  Lost ") == "Lost"


@pytest.mark.parametrize(
    ("date", "year"),
    [("1982-06-25", "1982"), ("", ""), (None, ""), ("TBA", ""), ("2024", "2024")],
)
def test_extract_year(date: str | None, year: str) -> None:
    """The year is the first four digits of a date."""
    assert extract_year(date) == year


def test_metadata_normalizes_provider_fields() -> None:
    """Numeric ids become strings and a null overview becomes empty."""
    metadata = MediaMetadata(
        provider_id=1091,
        title="The Thing",
        year="1982",
        overview=None,
        media_type=MediaMetadataType.MOVIE,
    )
    assert metadata.provider_id == "1091"
    assert metadata.overview == ""
    assert metadata.label == "The Thing (1982)"


def test_metadata_label_without_year() -> None:
    """The label is the bare title when the year is unknown."""
    metadata = MediaMetadata(
        provider_id="1", title="Lost", media_type=MediaMetadataType.TV_SHOW
    )
    assert metadata.label == "Lost"
