"""Data models for resolved media metadata.

The plan builders only ever consume metadata; they never construct it. The
TMDb clients normalize provider responses into MediaMetadata so downstream
code does not depend on the provider's field names (``title`` for movies,
``name`` for shows, ``release_date`` vs ``first_air_date``).
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

YEAR_LENGTH = 4


class MediaMetadataType(str, Enum):
    """Types of media the metadata clients resolve."""

    MOVIE = "movie"
    TV_SHOW = "tv_show"


class MediaMetadata(BaseModel):
    """Resolved metadata for a movie or show."""

    model_config = ConfigDict(frozen=True)

    provider_id: str
    """The ID of this item in the provider's system."""

    title: str
    """Canonical title (movie title or show name)."""

    year: str = ""
    """Release or first-air year, empty when unknown."""

    overview: str = ""
    """Short summary, empty when the provider has none."""

    media_type: MediaMetadataType
    """Whether this is a movie or a TV show."""

    @field_validator("provider_id", mode="before")
    @classmethod
    def coerce_provider_id(cls, value: Any) -> str:
        """Accept the numeric ids providers return."""
        return str(value)

    @field_validator("year", "overview", mode="before")
    @classmethod
    def none_to_empty(cls, value: Any) -> str:
        """Treat a missing value as an empty string."""
        return "" if value is None else value

    @property
    def label(self) -> str:
        """``Title (Year)``, or just the title when the year is unknown."""
        return f"{self.title} ({self.year})" if self.year else self.title


def extract_year(date_str: str | None) -> str:
    """Return the year of a ``YYYY-MM-DD`` string, or an empty string."""
    if date_str and len(date_str) >= YEAR_LENGTH and date_str[:YEAR_LENGTH].isdigit():
        return date_str[:YEAR_LENGTH]
    return ""
