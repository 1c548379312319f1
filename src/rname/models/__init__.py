"""Domain models for the rname application."""

from rname.models.core import FileEntry, MediaType, ParsedEpisode, ParsedMovie
from rname.models.plan import RenameEntry, RenamePlan

__all__ = [
    "FileEntry",
    "MediaType",
    "ParsedEpisode",
    "ParsedMovie",
    "RenameEntry",
    "RenamePlan",
]
