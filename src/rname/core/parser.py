"""Filename classifier and parser.

This module recognizes movie and TV-episode video files by name and extracts
structured fields from them. It also recognizes English subtitle files.

Design:
- Two independent pattern families. The movie command only classifies against
  MOVIE_PATTERN, the TV command only against TV_PATTERN.
- A file without an extension from VIDEO_EXTENSIONS is never classified.
- The ``is_*`` predicates and the ``parse_*`` functions share one matcher, so a
  file accepted by a predicate always parses. A parse failure after filtering
  raises ClassificationError.
"""

import re
from pathlib import Path
from typing import Optional

from rname.core.errors import ClassificationError
from rname.models.core import FileEntry, ParsedEpisode, ParsedMovie
from rname.utils.sanitize import clean

# Container extensions accepted as primary video files (case-sensitive).
VIDEO_EXTENSIONS = frozenset(
    {
        ".asf",
        ".avi",
        ".flv",
        ".ogg",
        ".ogv",
        ".mkv",
        ".mov",
        ".mp4",
        ".webm",
        ".wmv",
    }
)

SUBTITLE_EXTENSIONS = frozenset({".srt", ".smi", ".ssa", ".ass", ".vtt"})

# Title separated by "." or "_" from a 4 digit year starting with 19 or 20.
# The title capture is greedy, so the last year-like token wins.
MOVIE_PATTERN = re.compile(r"^(.+)[._]((?:19|20)\d{2})", re.IGNORECASE)

# Show name, optional "s", season digits, "e"/"x", start episode digits and an
# optional end episode after up to two of "e", "x" or "-".
TV_PATTERN = re.compile(r"(.+?)s?(\d+)[ex](\d+)[ex-]{0,2}(\d+)?", re.IGNORECASE)

# Same as TV_PATTERN but the name capture may not cross a "/", for subtitle
# files matched against their full path.
TV_PATH_PATTERN = re.compile(
    r"([^/]+?)s?(\d+)[ex](\d+)[ex-]{0,2}(\d+)?", re.IGNORECASE
)

# "en", "eng" or "english" bounded by start-of-string or a non-alphanumeric
# character on the left and a non-alphanumeric character on the right.
ENGLISH_MARKER = re.compile(r"(?:^|[^a-z0-9])eng?(?:lish)?[^a-z0-9]", re.IGNORECASE)


def _match_movie(name: str) -> Optional[tuple[str, str]]:
    match = MOVIE_PATTERN.match(name)
    if not match:
        return None
    title = clean(match.group(1))
    if not title:
        return None
    return title, match.group(2)


def _episode_numbers(
    match: re.Match[str],
) -> tuple[int, int, Optional[int]]:
    season = int(match.group(2))
    episode = int(match.group(3))
    end_episode = int(match.group(4)) if match.group(4) else None
    # An end episode that does not follow the start is not a dual-episode file.
    if end_episode is not None and end_episode <= episode:
        end_episode = None
    return season, episode, end_episode


def is_video(entry: FileEntry) -> bool:
    """Return True if the entry has a video container extension."""
    return entry.extension in VIDEO_EXTENSIONS


def is_movie_video(entry: FileEntry) -> bool:
    """Return True if the entry is a video file whose name classifies as a movie."""
    return is_video(entry) and _match_movie(entry.name) is not None


def is_episode_video(entry: FileEntry) -> bool:
    """Return True if the entry is a video file whose name classifies as an episode."""
    return is_video(entry) and TV_PATTERN.search(entry.name) is not None


def is_english_subtitle(entry: FileEntry) -> bool:
    """Return True for subtitle files carrying an English language marker.

    Example:
        ``Movie.2001.eng.srt`` and ``Movie.en.srt`` match, ``Movie.fre.srt``
        and ``Movie.english`` (no subtitle extension) do not.
    """
    return (
        entry.extension in SUBTITLE_EXTENSIONS
        and ENGLISH_MARKER.search(entry.name) is not None
    )


def parse_movie(entry: FileEntry) -> ParsedMovie:
    """Extract title and year from a movie file name.

    Args:
        entry: A file entry already accepted by ``is_movie_video``.

    Returns:
        The parsed movie.

    Raises:
        ClassificationError: If the name does not match the movie pattern.
    """
    fields = _match_movie(entry.name)
    if fields is None:
        raise ClassificationError(
            f"Failed to extract movie name & year from {entry.name!r}"
        )
    title, year = fields
    return ParsedMovie(
        title=title, year=year, source_path=entry.path, source_name=entry.name
    )


def parse_episode(entry: FileEntry) -> ParsedEpisode:
    """Extract show name, season and episode numbers from an episode file name.

    Args:
        entry: A file entry already accepted by ``is_episode_video``.

    Returns:
        The parsed episode.

    Raises:
        ClassificationError: If the name does not match the TV pattern.
    """
    match = TV_PATTERN.search(entry.name)
    if not match:
        raise ClassificationError(f"Failed to extract tv show info from {entry.name!r}")
    season, episode, end_episode = _episode_numbers(match)
    return ParsedEpisode(
        show=clean(match.group(1)),
        season=season,
        episode=episode,
        end_episode=end_episode,
        source_path=entry.path,
        source_name=entry.name,
    )


def parse_episode_from_path(path: Path) -> tuple[int, int, Optional[int]]:
    """Recover season, start episode and end episode from a subtitle path.

    Subtitles often sit in a nested ``Subs`` folder under a name that lacks the
    show prefix, so the whole path is searched instead of the base name.

    Raises:
        ClassificationError: If no season/episode token is found in the path.
    """
    match = TV_PATH_PATTERN.search(path.as_posix())
    if not match:
        raise ClassificationError(f"Failed to extract tv subtitle info from {path}")
    return _episode_numbers(match)
