"""Filesystem operations for rname.

Provides the two primitives the execution layer needs: a rename that falls back
to copy+unlink across devices, and a recursive delete that treats a missing
path as already deleted.
"""

import errno
import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def atomic_move(src: Path, dst: Path, *, overwrite: bool = False) -> None:
    """Move *src* to *dst*.

    A move onto itself is a no-op, so re-running on an already renamed
    directory is safe.

    Args:
        src: Source file or directory path.
        dst: Destination path.
        overwrite: If True, replace a destination file that already exists.

    Raises:
        FileExistsError: If dst exists and *overwrite* is False.
        FileNotFoundError: If src is missing.
        OSError: For non-recoverable FS errors.

    Example:
        >>> from pathlib import Path
        >>> src = Path('a.txt')
        >>> src.write_text('hello')
        >>> atomic_move(src, Path('b.txt'))
        >>> Path('b.txt').read_text()
        'hello'
    """
    if src == dst:
        return
    if dst.exists() and not overwrite:
        raise FileExistsError(f"Destination {dst} exists and overwrite is False.")
    try:
        if overwrite:
            src.replace(dst)
        else:
            src.rename(dst)
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise
        logger.debug("Cross-device move %s -> %s", src, dst)
        shutil.move(str(src), str(dst))


def remove_path(path: Path) -> bool:
    """Delete *path* recursively.

    Returns:
        True if something was deleted, False if *path* no longer existed.

    Raises:
        OSError: For any failure other than the path being gone.
    """
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except FileNotFoundError:
        # Already consumed by a rename or by deleting its parent directory.
        return False
    return True
