"""Utility modules for rname."""

from rname.utils.sanitize import (
    clean,
    clean_filename,
    clean_path,
    remove_trailing_slash,
)

__all__ = [
    "clean",
    "clean_filename",
    "clean_path",
    "remove_trailing_slash",
]
