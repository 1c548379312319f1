"""Tests for rname.core.scanner."""

import os
from pathlib import Path

import pytest

from rname.core.scanner import regular_files, scan_directory


@pytest.fixture
def media_dir(tmp_path: Path) -> Path:
    """A small directory tree with a nested folder."""
    root = tmp_path / "media"
    (root / "Subs").mkdir(parents=True)
    (root / "movie.mkv").write_text("video")
    (root / "Subs" / "English.srt").write_text("sub")
    (root / "notes.txt").write_text("text")
    return root


def test_scan_lists_root_first_then_sorted(media_dir: Path) -> None:
    """The root comes first, then every entry in sorted path order."""
    entries = scan_directory(media_dir)
    assert [e.path for e in entries] == [
        media_dir,
        media_dir / "Subs",
        media_dir / "Subs" / "English.srt",
        media_dir / "movie.mkv",
        media_dir / "notes.txt",
    ]
    assert not entries[0].is_file
    assert not entries[1].is_file
    assert entries[2].is_file
    assert entries[2].name == "English.srt"


def test_regular_files(media_dir: Path) -> None:
    """Directories are dropped from the file list."""
    names = [e.name for e in regular_files(scan_directory(media_dir))]
    assert names == ["English.srt", "movie.mkv", "notes.txt"]


@pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
def test_symlinks_are_listed_not_followed(media_dir: Path, tmp_path: Path) -> None:
    """Symlinks appear in the listing but are not regular files."""
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "other.mkv").write_text("x")
    (media_dir / "link").symlink_to(outside, target_is_directory=True)
    (media_dir / "movie-link.mkv").symlink_to(media_dir / "movie.mkv")

    entries = scan_directory(media_dir)
    paths = [e.path for e in entries]
    assert media_dir / "link" in paths
    assert media_dir / "link" / "other.mkv" not in paths
    names = [e.name for e in regular_files(entries)]
    assert "movie-link.mkv" not in names
    assert "link" not in names


def test_scan_missing_directory(tmp_path: Path) -> None:
    """A missing directory raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        scan_directory(tmp_path / "missing")


def test_scan_file_instead_of_directory(tmp_path: Path) -> None:
    """A file path raises NotADirectoryError."""
    file = tmp_path / "file.mkv"
    file.write_text("x")
    with pytest.raises(NotADirectoryError):
        scan_directory(file)
