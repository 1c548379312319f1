"""Rename planner for a single TV season.

Builds the rename plan for every episode video file of one directory and for
the English subtitles that go with them.

Name format:
    ``{basis} - s{SS}e{EE}[-e{EE}][ - {Episode Title}]{ext}`` for videos and
    ``{basis} - s{SS}e{EE}[-e{EE}][ - {Episode Title}] [{n}].en{ext}`` for
    subtitles, where ``n`` counts subtitles per episode and extension.

Season and episode numbers are always zero-padded to width 2; wider numbers
are written as-is.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Mapping, Optional, Sequence

from rname.core.errors import MultipleSeasonsError, NoSeasonsError
from rname.core.parser import parse_episode_from_path
from rname.core.planner import ensure_unique_targets, make_entry, rename_basis
from rname.metadata.models import MediaMetadata
from rname.models.core import FileEntry, MediaType, ParsedEpisode
from rname.models.plan import RenameEntry, RenamePlan
from rname.utils.sanitize import clean_filename

logger = logging.getLogger(__name__)


def validate_single_season(episodes: Sequence[ParsedEpisode]) -> int:
    """Return the one season shared by all *episodes*.

    Raises:
        NoSeasonsError: If *episodes* is empty.
        MultipleSeasonsError: If more than one season number is present.
    """
    seasons = sorted({episode.season for episode in episodes})
    if not seasons:
        raise NoSeasonsError()
    if len(seasons) > 1:
        raise MultipleSeasonsError(seasons)
    return seasons[0]


def sort_episodes(episodes: Sequence[ParsedEpisode]) -> list[ParsedEpisode]:
    """Sort episodes by start episode, keeping input order for ties."""
    return sorted(episodes, key=lambda e: e.episode)


def episode_stem(
    basis: str,
    season: int,
    episode: int,
    end_episode: Optional[int] = None,
    title: Optional[str] = None,
) -> str:
    """Compose the name of an episode file without extension or cleaning."""
    stem = f"{basis} - s{season:02d}e{episode:02d}"
    # Dual-episode files (Stargate SG-1 - S01E01-E02)
    if end_episode is not None:
        stem = f"{stem}-e{end_episode:02d}"
    if title:
        stem = f"{stem} - {title}"
    return stem


def create_tv_plan(
    episodes: Sequence[ParsedEpisode],
    subtitles: Sequence[FileEntry],
    metadata: MediaMetadata,
    root_dir: Path,
    episode_titles: Optional[Mapping[int, str]] = None,
    skip_titles: bool = False,
) -> RenamePlan:
    """Create the rename plan for one TV season directory.

    Args:
        episodes: Every parsed episode video file of the directory.
        subtitles: English subtitle candidates found in the directory.
        metadata: Resolved show metadata.
        root_dir: Absolute directory the renamed files are placed in.
        episode_titles: Episode number to episode title, may be empty.
        skip_titles: Leave episode titles out of every target name.

    Returns:
        The plan: videos sorted by episode, then subtitles sorted by episode.

    Raises:
        NoSeasonsError: If there are no episodes.
        MultipleSeasonsError: If the episodes span several seasons.
        ClassificationError: If a subtitle path has no season/episode token.
        DuplicateTargetError: If two files would get the same target name.
        pydantic.ValidationError: If *root_dir* is relative.
    """
    season = validate_single_season(episodes)
    titles: Mapping[int, str] = {} if skip_titles else (episode_titles or {})
    basis = rename_basis(metadata)

    video_items = []
    for parsed in sort_episodes(episodes):
        stem = episode_stem(
            basis,
            parsed.season,
            parsed.episode,
            parsed.end_episode,
            titles.get(parsed.episode),
        )
        target = clean_filename(f"{stem}{parsed.extension}")
        video_items.append(
            make_entry(parsed.source_path, parsed.source_name, root_dir, target)
        )

    subtitle_items = _subtitle_entries(subtitles, basis, titles, root_dir)
    items = video_items + subtitle_items
    ensure_unique_targets(items)
    logger.debug(
        "TV plan for %s: %d video(s), %d subtitle(s)",
        root_dir,
        len(video_items),
        len(subtitle_items),
    )
    return RenamePlan(
        root_dir=root_dir,
        media_type=MediaType.TV,
        basis=basis,
        season=season,
        items=items,
    )


def _subtitle_entries(
    subtitles: Sequence[FileEntry],
    basis: str,
    titles: Mapping[int, str],
    root_dir: Path,
) -> list[RenameEntry]:
    # Counts are assigned in path order so the numbering is deterministic.
    counts: Counter[str] = Counter()
    numbered: list[tuple[int, RenameEntry]] = []
    for subtitle in sorted(subtitles, key=lambda s: s.path.as_posix()):
        season, episode, end_episode = parse_episode_from_path(subtitle.path)
        count_key = f"{episode:02d}{subtitle.extension}"
        counts[count_key] += 1
        stem = episode_stem(basis, season, episode, end_episode, titles.get(episode))
        count = counts[count_key]
        target = clean_filename(f"{stem} [{count}].en{subtitle.extension}")
        numbered.append(
            (episode, make_entry(subtitle.path, subtitle.name, root_dir, target))
        )
    numbered.sort(key=lambda pair: pair[0])
    return [entry for _, entry in numbered]
