"""Rename planner for movies.

This module computes the rename basis shared by every file of a movie or show
and builds the rename plan for a single movie directory.

Design:
- Pure functions: no filesystem access, no network. All inputs are resolved
  before planning.
- Target names are unique within a plan. Multiple English subtitles for the
  same movie are disambiguated with an incrementing index.
"""

import logging
from pathlib import Path
from typing import Iterable, Sequence

from rname.core.errors import DuplicateTargetError
from rname.metadata.models import MediaMetadata
from rname.models.core import FileEntry, MediaType, ParsedMovie
from rname.models.plan import RenameEntry, RenamePlan
from rname.utils.sanitize import clean_filename

logger = logging.getLogger(__name__)


def rename_basis(metadata: MediaMetadata) -> str:
    """Return the cleaned ``Title (Year) {tmdb-ID}`` basis for *metadata*."""
    return clean_filename(
        f"{metadata.title} ({metadata.year}) {{tmdb-{metadata.provider_id}}}"
    )


def make_entry(
    original_path: Path, original_name: str, root_dir: Path, target_name: str
) -> RenameEntry:
    """Build a RenameEntry whose target lives directly in *root_dir*."""
    return RenameEntry(
        original_path=original_path,
        original_name=original_name,
        target_name=target_name,
        target_path=root_dir / target_name,
    )


def ensure_unique_targets(entries: Iterable[RenameEntry]) -> None:
    """Raise DuplicateTargetError if two entries share a target name."""
    seen: set[str] = set()
    for entry in entries:
        if entry.target_name in seen:
            raise DuplicateTargetError(entry.target_name)
        seen.add(entry.target_name)


def _by_name(entry: FileEntry) -> tuple[str, str]:
    # Identical names from different folders fall back to path order.
    return entry.name, entry.path.as_posix()


def create_movie_plan(
    movie: ParsedMovie,
    subtitles: Sequence[FileEntry],
    metadata: MediaMetadata,
    root_dir: Path,
) -> RenamePlan:
    """Create the rename plan for one movie directory.

    Args:
        movie: The chosen primary video file.
        subtitles: English subtitle candidates found in the directory.
        metadata: Resolved movie metadata.
        root_dir: Absolute directory the renamed files are placed in.

    Returns:
        The plan: the video entry first, then subtitles sorted by file name.

    Raises:
        pydantic.ValidationError: If *root_dir* is relative.

    Example:
        With basis ``The Thing (1982) {tmdb-1091}`` and subtitles ``a.eng.srt``
        and ``b.eng.srt`` the targets are ``... {tmdb-1091}.mkv``,
        ``... {tmdb-1091}.en.srt`` and ``... {tmdb-1091} 1.en.srt``.
    """
    basis = rename_basis(metadata)
    video_ext = Path(movie.source_name).suffix
    items = [
        make_entry(
            movie.source_path, movie.source_name, root_dir, f"{basis}{video_ext}"
        )
    ]

    for index, subtitle in enumerate(sorted(subtitles, key=_by_name)):
        suffix = f" {index}" if index > 0 else ""
        items.append(
            make_entry(
                subtitle.path,
                subtitle.name,
                root_dir,
                f"{basis}{suffix}.en{subtitle.extension}",
            )
        )

    ensure_unique_targets(items)
    logger.debug("Movie plan for %s: %d item(s)", root_dir, len(items))
    return RenamePlan(
        root_dir=root_dir, media_type=MediaType.MOVIE, basis=basis, items=items
    )
