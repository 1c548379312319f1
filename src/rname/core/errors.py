"""Error taxonomy for rname.

- ValidationError and its subclasses describe problems with the user's input
  or directory contents. They abort the current command with a message.
- ClassificationError signals that the extension allow-lists and filename
  patterns disagree. It is an internal invariant violation.
- MissingAPIKeyError lives with the configuration code but shares the base.
"""


class RnameError(Exception):
    """Base class for all errors raised by rname."""


class ValidationError(RnameError):
    """A user-facing validation failure that aborts the command."""


class NoSeasonsError(ValidationError):
    """Raised when no TV episode files are found in a directory."""

    def __init__(self) -> None:
        """Initialize with the fixed message."""
        super().__init__("No seasons found, cannot proceed with renaming")


class MultipleSeasonsError(ValidationError):
    """Raised when episode files from more than one season are found."""

    def __init__(self, seasons: list[int]) -> None:
        """Initialize with the seasons that were found."""
        super().__init__(
            "Multiple seasons found, cannot change multiple seasons at once "
            f"(seasons: {', '.join(str(s) for s in seasons)})"
        )
        self.seasons = seasons


class NoVideoFilesError(ValidationError):
    """Raised when no movie video file is found in a directory."""


class EmptyQueryError(ValidationError):
    """Raised when a metadata search is attempted with an empty query."""


class NoResultsError(ValidationError):
    """Raised when the metadata provider returns no candidates."""


class SelectionError(ValidationError):
    """Raised when an interactive selection does not resolve to one option."""


class DuplicateTargetError(ValidationError):
    """Raised when two entries of a plan would share a target name."""

    def __init__(self, target_name: str) -> None:
        """Initialize with the clashing target name."""
        super().__init__(f"More than one file would be renamed to {target_name!r}")
        self.target_name = target_name


class ClassificationError(RnameError):
    """Raised when a file that passed the filters cannot be parsed."""
