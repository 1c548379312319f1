"""Directory scanner.

Walks a directory and returns a flat listing of FileEntry values. The listing
is taken once, before any plan is computed or executed, because renaming
mutates the tree the listing describes.
"""

import logging
from pathlib import Path
from typing import Iterable

from rname.models.core import FileEntry

logger = logging.getLogger(__name__)


def scan_directory(root: Path) -> list[FileEntry]:
    """List *root* and everything below it.

    Args:
        root: Absolute directory path.

    Returns:
        The root itself first, then every file, directory and symlink below it
        in sorted path order. Symlinked directories are listed but not
        descended into.

    Raises:
        FileNotFoundError: If *root* does not exist.
        NotADirectoryError: If *root* is not a directory.
    """
    if not root.exists():
        raise FileNotFoundError(f"Directory does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    entries = [FileEntry.from_path(root)]
    entries.extend(FileEntry.from_path(path) for path in _walk(root))
    logger.debug("Scanned %s: %d entries", root, len(entries))
    return entries


def _walk(directory: Path) -> Iterable[Path]:
    for path in sorted(directory.iterdir()):
        yield path
        if path.is_dir() and not path.is_symlink():
            yield from _walk(path)


def regular_files(entries: Iterable[FileEntry]) -> list[FileEntry]:
    """Keep only regular files, dropping directories and symlinks."""
    return [entry for entry in entries if entry.is_file and not entry.is_symlink]
