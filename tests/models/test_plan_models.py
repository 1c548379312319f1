"""Tests for rname.models (plan and parsed file models)."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from rname.models.core import FileEntry, MediaType, ParsedEpisode, ParsedMovie
from rname.models.plan import RenameEntry, RenamePlan


def test_rename_entry_requires_absolute_target() -> None:
    """Relative target paths are rejected."""
    with pytest.raises(ValidationError, match="absolute"):
        RenameEntry(
            original_path=Path("/m/a.mkv"),
            original_name="a.mkv",
            target_name="b.mkv",
            target_path=Path("b.mkv"),
        )


def test_rename_entry_target_name_must_match_path() -> None:
    """The target path must end with the target name."""
    with pytest.raises(ValidationError, match="does not end with"):
        RenameEntry(
            original_path=Path("/m/a.mkv"),
            original_name="a.mkv",
            target_name="b.mkv",
            target_path=Path("/m/c.mkv"),
        )


def test_rename_plan_properties() -> None:
    """The plan exposes original paths and target names."""
    items = [
        RenameEntry(
            original_path=Path(f"/m/{name}"),
            original_name=name,
            target_name=f"X {name}",
            target_path=Path(f"/m/X {name}"),
        )
        for name in ("a.mkv", "a.srt")
    ]
    plan = RenamePlan(
        root_dir=Path("/m"), media_type=MediaType.MOVIE, basis="X", items=items
    )
    assert plan.original_paths == {Path("/m/a.mkv"), Path("/m/a.srt")}
    assert plan.target_names == ["X a.mkv", "X a.srt"]


def test_models_are_frozen() -> None:
    """Plans and entries cannot be mutated."""
    plan = RenamePlan(root_dir=Path("/m"), media_type=MediaType.TV, basis="X")
    with pytest.raises(ValidationError):
        plan.basis = "Y"  # type: ignore[misc]


def test_file_entry_extension() -> None:
    """The extension is the last suffix of the name."""
    assert FileEntry(path=Path("/m/a.en.srt"), name="a.en.srt").extension == ".srt"
    assert FileEntry(path=Path("/m/Subs"), name="Subs").extension == ""


def test_parsed_movie_requires_title() -> None:
    """An empty movie title is invalid."""
    with pytest.raises(ValidationError):
        ParsedMovie(title="", source_path=Path("/m/a.mkv"), source_name="a.mkv")


def test_parsed_episode_rejects_negative_numbers() -> None:
    """Season and episode numbers are non-negative."""
    with pytest.raises(ValidationError):
        ParsedEpisode(
            show="S",
            season=-1,
            episode=1,
            source_path=Path("/m/a.mkv"),
            source_name="a.mkv",
        )
