"""Purge set calculation.

After a plan has been applied, everything in the directory that the plan did
not reference is a candidate for deletion. The calculation here is pure; the
deletion itself lives in ``rname.core.apply``.
"""

from pathlib import Path
from typing import Iterable

from rname.models.core import FileEntry


def purge_candidates(
    entries: Iterable[FileEntry], root_dir: Path, keep: Iterable[Path]
) -> list[Path]:
    """Return the paths of *entries* that are safe to delete.

    Args:
        entries: The full directory listing taken before any rename.
        root_dir: The directory itself, which is never purged.
        keep: Original paths referenced by the rename plan.

    Returns:
        Paths in listing order, excluding *root_dir* and every kept path.

    Example:
        >>> root = Path("/m")
        >>> listing = [FileEntry(path=root / n, name=n) for n in ("a", "b")]
        >>> purge_candidates(listing, root, [root / "a"])
        [PosixPath('/m/b')]
    """
    protected = {root_dir, *keep}
    return [entry.path for entry in entries if entry.path not in protected]
