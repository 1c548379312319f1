"""Tests for rname.cli.renderer."""

from pathlib import Path

from rich.console import Console

from rname.cli.renderer import format_candidate, render_plan, render_settings
from rname.metadata.models import MediaMetadata, MediaMetadataType
from rname.models.core import MediaType
from rname.models.plan import RenameEntry, RenamePlan

OVERVIEW = "The quick brown fox jumps over the lazy dog again and again"


def candidate(overview: str = OVERVIEW, year: str = "2000") -> MediaMetadata:
    """Build a movie candidate."""
    return MediaMetadata(
        provider_id="1",
        title="Fox",
        year=year,
        overview=overview,
        media_type=MediaMetadataType.MOVIE,
    )


def test_format_candidate_without_overview() -> None:
    """Only the label is shown when there is no overview."""
    assert format_candidate(candidate(overview=""), 80) == "Fox (2000)"
    assert format_candidate(candidate(overview="", year=""), 80) == "Fox"


def test_format_candidate_short_overview() -> None:
    """An overview that fits is shown unchanged."""
    assert format_candidate(candidate(), 150) == f"Fox (2000)\n    └─ {OVERVIEW}"


def test_format_candidate_needs_room_to_spare() -> None:
    """The whole overview is shown only with a prefix width left over."""
    assert format_candidate(candidate(), 73) == f"Fox (2000)\n    └─ {OVERVIEW}"
    assert format_candidate(candidate(), 68) == (
        "Fox (2000)\n    └─ The quick brown fox jumps over the lazy dog again and..."
    )


def test_format_candidate_trims_at_word_boundary() -> None:
    """A cut at a space keeps the last full word."""
    assert format_candidate(candidate(), 40) == (
        "Fox (2000)\n    └─ The quick brown fox jumps over..."
    )


def test_format_candidate_drops_partial_word() -> None:
    """A cut inside a word drops that word."""
    assert format_candidate(candidate(), 43) == (
        "Fox (2000)\n    └─ The quick brown fox jumps over..."
    )


def test_format_candidate_strips_trailing_punctuation() -> None:
    """Punctuation before the ellipsis is removed."""
    result = format_candidate(candidate(overview="Hello, world, " + "x" * 50), 30)
    assert result == "Fox (2000)\n    └─ Hello, world..."


def test_format_candidate_caps_width() -> None:
    """Very wide terminals are capped at 150 columns."""
    result = format_candidate(candidate(overview="word " * 100), 500)
    second_line = result.splitlines()[1]
    assert len(second_line) <= 150
    assert second_line.endswith("word...")


def test_render_plan() -> None:
    """The plan table lists original and target names."""
    console = Console(record=True, width=200)
    plan = RenamePlan(
        root_dir=Path("/m"),
        media_type=MediaType.MOVIE,
        basis="Fox (2000) {tmdb-1}",
        items=[
            RenameEntry(
                original_path=Path("/m/fox.2000.mkv"),
                original_name="fox.2000.mkv",
                target_name="Fox (2000) {tmdb-1}.mkv",
                target_path=Path("/m/Fox (2000) {tmdb-1}.mkv"),
            )
        ],
    )
    render_plan(plan, console=console)
    text = console.export_text()
    assert "Original" in text
    assert "Rename" in text
    assert "fox.2000.mkv" in text
    assert "Fox (2000) {tmdb-1}.mkv" in text


def test_render_settings() -> None:
    """Unset values render as empty cells."""
    console = Console(record=True, width=120)
    render_settings({"api_key": None, "config_file": "/c/config.toml"}, console)
    text = console.export_text()
    assert "api_key" in text
    assert "/c/config.toml" in text
    assert "None" not in text
