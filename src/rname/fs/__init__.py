"""Filesystem operations for rname."""

from rname.fs.operations import atomic_move, remove_path

__all__ = ["atomic_move", "remove_path"]
