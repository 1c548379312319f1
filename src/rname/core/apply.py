"""Apply engine for rename plans.

Executes a computed RenamePlan against the filesystem:
1. rename every entry in plan order,
2. delete the purge candidates (unless the caller keeps them),
3. move the directory itself to its final name.

There is no rollback. A failure stops the run at the failing entry and is
re-raised, so a partially applied plan always stops at a known position.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from rname.fs.operations import atomic_move, remove_path
from rname.models.core import MediaType
from rname.models.plan import RenamePlan
from rname.utils.sanitize import clean_path

logger = logging.getLogger(__name__)


@dataclass
class ApplyResult:
    """Result of applying a rename plan."""

    moved: int = 0
    purged: List[Path] = field(default_factory=list)
    final_dir: Path | None = None


def apply_plan(plan: RenamePlan) -> int:
    """Rename every entry of *plan* in order.

    Returns:
        The number of entries renamed.

    Raises:
        OSError: From the first rename that fails; later entries are untouched.
    """
    moved = 0
    for item in plan.items:
        try:
            atomic_move(item.original_path, item.target_path)
        except OSError:
            logger.error(
                "Rename failed after %d of %d item(s): %s",
                moved,
                len(plan.items),
                item.original_path,
            )
            raise
        logger.info("Renamed %s -> %s", item.original_name, item.target_name)
        moved += 1
    return moved


def purge(paths: Iterable[Path]) -> list[Path]:
    """Delete every path in *paths*, skipping those that are already gone.

    Returns:
        The paths that were actually deleted.
    """
    deleted = []
    for path in paths:
        if remove_path(path):
            logger.info("Deleted %s", path)
            deleted.append(path)
    return deleted


def relocate_movie_directory(root_dir: Path, basis: str) -> Path:
    """Rename the movie directory to ``<parent>/<basis>``."""
    target = root_dir.parent / clean_path(basis)
    atomic_move(root_dir, target)
    logger.info("Moved directory %s -> %s", root_dir, target)
    return target


def relocate_season_directory(root_dir: Path, basis: str, season: int) -> Path:
    """Move the season directory to ``<parent>/<basis>/Season NN``.

    The show directory is created when missing.
    """
    show_dir = root_dir.parent / clean_path(basis)
    show_dir.mkdir(exist_ok=True)
    target = show_dir / f"Season {season:02d}"
    atomic_move(root_dir, target)
    logger.info("Moved directory %s -> %s", root_dir, target)
    return target


def execute_plan(
    plan: RenamePlan,
    purge_paths: Iterable[Path] = (),
) -> ApplyResult:
    """Apply *plan*, purge leftovers and move the directory, in that order.

    Args:
        plan: The confirmed plan.
        purge_paths: Paths to delete after renaming (empty to keep everything).
    """
    result = ApplyResult(moved=apply_plan(plan))
    result.purged = purge(purge_paths)
    if plan.media_type == MediaType.TV:
        if plan.season is None:
            raise ValueError("TV plan has no season")
        result.final_dir = relocate_season_directory(
            plan.root_dir, plan.basis, plan.season
        )
    else:
        result.final_dir = relocate_movie_directory(plan.root_dir, plan.basis)
    return result
