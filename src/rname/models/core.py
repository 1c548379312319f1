"""Core domain models for rname.

This module defines the value objects passed between the directory walker, the
filename parser and the plan builders.
- FileEntry is what the walker yields for every path under the directory.
- ParsedMovie / ParsedEpisode are what the parser extracts from a video file
  name.

Design:
- All models are frozen pydantic models. None of them outlives a single
  command invocation.
- Paths are kept as pathlib.Path; the walker produces absolute paths.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MediaType(str, Enum):
    """Kind of media a command renames."""

    MOVIE = "movie"
    TV = "tv"


class FileEntry(BaseModel):
    """A single entry of a directory listing (file, directory or symlink)."""

    model_config = ConfigDict(frozen=True)

    path: Path
    """Filesystem path, stable for the duration of one run."""

    name: str
    """Base name of the entry."""

    is_file: bool = True
    """Whether the entry is a regular file."""

    is_symlink: bool = False
    """Whether the entry is a symbolic link."""

    @classmethod
    def from_path(cls, path: Path) -> "FileEntry":
        """Build an entry for *path* by inspecting the filesystem."""
        return cls(
            path=path,
            name=path.name,
            is_file=path.is_file() and not path.is_symlink(),
            is_symlink=path.is_symlink(),
        )

    @property
    def extension(self) -> str:
        """Extension of the entry name, including the leading dot."""
        return Path(self.name).suffix


class ParsedMovie(BaseModel):
    """Fields extracted from a movie video file name."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    """Readable title, already passed through ``clean``."""

    year: str = ""
    """Four digit year from the file name (empty when absent)."""

    source_path: Path
    source_name: str


class ParsedEpisode(BaseModel):
    """Fields extracted from a TV episode video file name."""

    model_config = ConfigDict(frozen=True)

    show: str
    """Readable show name, already passed through ``clean``."""

    season: int = Field(ge=0)
    episode: int = Field(ge=0)
    """Start episode number."""

    end_episode: Optional[int] = None
    """End episode number, only set for dual-episode files."""

    source_path: Path
    source_name: str

    @property
    def extension(self) -> str:
        """Extension of the source file name, including the leading dot."""
        return Path(self.source_name).suffix
