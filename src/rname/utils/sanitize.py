"""String sanitizers for titles, filenames and paths.

All helpers are total: they accept any string and never raise. An empty string
is a valid result.

- clean: turn a raw, filename-derived title into a readable title.
- clean_filename / clean_path: make a composed name safe for the filesystem
  while keeping punctuation that carries meaning in Plex names (parentheses
  around the year, braces around the TMDb id tag).
"""

import re

_TITLE_SEPARATORS = re.compile(r"[._]")
_NOT_ALNUM_OR_SPACE = re.compile(r"[^a-zA-Z0-9\s]")
_TRAILING_SLASHES = re.compile(r"/+$")
# Allowed: letters, digits, whitespace and any of (){}[]-&,.!%'
_NOT_FILENAME_SAFE = re.compile(r"[^a-zA-Z0-9\s.(){}\[\]\-&,!%']")


def clean(value: str) -> str:
    """Replace dots/underscores with spaces and drop all other punctuation.

    Args:
        value: Raw text, usually a capture from a filename pattern.

    Returns:
        The readable title, trimmed.

    Example:
        >>> clean("The.Thing_")
        'The Thing'
    """
    value = _TITLE_SEPARATORS.sub(" ", value)
    return _NOT_ALNUM_OR_SPACE.sub("", value).strip()


def clean_filename(value: str) -> str:
    """Strip every character that is unsafe in a filename, then trim."""
    return _NOT_FILENAME_SAFE.sub("", value).strip()


def clean_path(value: str) -> str:
    """Strip every character that is unsafe in a directory name, then trim."""
    return _NOT_FILENAME_SAFE.sub("", value).strip()


def remove_trailing_slash(value: str) -> str:
    """Remove trailing ``/`` characters, then trim whitespace.

    Example:
        >>> remove_trailing_slash("a/b/")
        'a/b'
    """
    return _TRAILING_SLASHES.sub("", value.strip()).strip()
