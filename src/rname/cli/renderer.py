"""Renderer for CLI output.

Renders rename plans as rich tables and formats metadata candidates for the
interactive selector.
"""

import re
from typing import Mapping

from rich.console import Console
from rich.table import Table

from rname.metadata.models import MediaMetadata
from rname.models.plan import RenamePlan

OVERVIEW_PREFIX = "    └─ "
ELLIPSIS = "..."
MAX_LABEL_WIDTH = 150

_WORD_CHAR = re.compile(r"\w")
_WHITESPACE = re.compile(r"\s")


def render_plan(plan: RenamePlan, console: Console | None = None) -> None:
    """Render a rename plan as an Original / Rename table."""
    console = console or Console()
    table = Table()
    table.add_column("Original", style="cyan")
    table.add_column("Rename", style="green")
    for item in plan.items:
        table.add_row(item.original_name, item.target_name)
    console.print(table)


def render_settings(
    settings: Mapping[str, object], console: Console | None = None
) -> None:
    """Render configuration settings as a Setting / Value table."""
    console = console or Console()
    table = Table()
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    for key, value in settings.items():
        table.add_row(key, "" if value is None else str(value))
    console.print(table)


def format_candidate(metadata: MediaMetadata, width: int) -> str:
    """Format a metadata candidate for selection.

    The first line is ``Title (Year)``. A non-empty overview follows on a second
    line, trimmed at a word boundary to fit ``min(150, width)`` columns. The
    overview is only shown whole when it fits with the prefix width to spare.

    Args:
        metadata: The candidate.
        width: Terminal width in columns.
    """
    label = metadata.label
    overview = metadata.overview
    if not overview:
        return label

    max_length = min(MAX_LABEL_WIDTH, width)
    if len(overview) + 2 * len(OVERVIEW_PREFIX) <= max_length:
        return f"{label}\n{OVERVIEW_PREFIX}{overview}"

    trim_length = max(max_length - len(OVERVIEW_PREFIX) - len(ELLIPSIS), 0)
    trimmed = overview[:trim_length]
    # Cut mid-word: drop the partial word.
    if _WORD_CHAR.match(overview[trim_length : trim_length + 1]):
        trimmed = " ".join(_WHITESPACE.split(trimmed)[:-1])
    trimmed = trimmed.rstrip()
    while trimmed and not _WORD_CHAR.match(trimmed[-1]):
        trimmed = trimmed[:-1]
    return f"{label}\n{OVERVIEW_PREFIX}{trimmed}{ELLIPSIS}"
