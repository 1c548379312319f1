"""Models for rename plans.

This module defines the data structures that describe a computed rename plan.
- A plan is an ordered list of RenameEntry values: primary video entries
  first, subtitle entries after.
- Entries are validated for absolute target paths to prevent accidental
  relative moves. The plan builders guarantee unique target names.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rname.models.core import MediaType


class RenameEntry(BaseModel):
    """A single file rename in a plan."""

    model_config = ConfigDict(frozen=True)

    original_path: Path
    """Path of the file before renaming."""

    original_name: str
    """Base name of the file before renaming."""

    target_name: str
    """Base name of the file after renaming."""

    target_path: Path
    """Absolute path of the file after renaming."""

    @model_validator(mode="after")
    def validate_target_path(self) -> "RenameEntry":
        """Ensure the target path is absolute and ends with the target name.

        Raises:
            ValueError: If the target path is relative or does not match.
        """
        if not self.target_path.is_absolute():
            raise ValueError(f"Target path must be absolute: {self.target_path}")
        if self.target_path.name != self.target_name:
            raise ValueError(
                f"Target path {self.target_path} does not end with {self.target_name}"
            )
        return self


class RenamePlan(BaseModel):
    """An ordered collection of renames computed for one directory."""

    model_config = ConfigDict(frozen=True)

    root_dir: Path
    """Directory the plan was computed for."""

    media_type: MediaType
    """Whether this is a movie or a TV season plan."""

    basis: str
    """Cleaned ``Title (Year) {tmdb-ID}`` string shared by every target name."""

    season: Optional[int] = None
    """Season number, set for TV plans only."""

    items: List[RenameEntry] = Field(default_factory=list)
    """Video entries first, then subtitle entries."""

    @property
    def original_paths(self) -> set[Path]:
        """Paths referenced by the plan (files that must not be purged)."""
        return {item.original_path for item in self.items}

    @property
    def target_names(self) -> list[str]:
        """Target names in plan order."""
        return [item.target_name for item in self.items]
