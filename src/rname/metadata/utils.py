"""Query helpers for metadata searches."""

import re
from typing import Optional

from rname.core.errors import EmptyQueryError

# "y:" followed by 4 digits, case insensitive, first occurrence only.
YEAR_HINT_PATTERN = re.compile(r"y:(\d{4})", re.IGNORECASE)


def require_query(query: str) -> str:
    """Return *query* trimmed, or raise EmptyQueryError if nothing is left."""
    query = query.strip()
    if not query:
        raise EmptyQueryError("Empty search query")
    return query


def split_year_hint(query: str) -> tuple[str, Optional[str]]:
    """Split a ``y:YYYY`` year hint out of a search query.

    Args:
        query: Free text, e.g. ``"The Thing y:1982"``.

    Returns:
        The query without the hint (trimmed) and the hinted year, if any.

    Raises:
        EmptyQueryError: If no search text is left.

    Example:
        >>> split_year_hint("The Thing y:1982")
        ('The Thing', '1982')
    """
    year = None
    match = YEAR_HINT_PATTERN.search(query)
    if match:
        year = match.group(1)
        query = YEAR_HINT_PATTERN.sub("", query, count=1)
    return require_query(query), year
