"""Logging setup for rname.

Configures the ``rname`` logger once per process. Debug output is enabled with
the ``--debug`` flag or the RNAME_DEBUG environment variable.
"""

import logging
import os
from typing import Optional

_logger: Optional[logging.Logger] = None


def debug_enabled() -> bool:
    """Return True if RNAME_DEBUG is set to 1."""
    return os.getenv("RNAME_DEBUG", "0") == "1"


def setup_logger(debug: bool = False) -> logging.Logger:
    """Attach a stream handler to the ``rname`` logger and set its level.

    Calling it again only updates the level.
    """
    global _logger
    logger = _logger or logging.getLogger("rname")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("[%(levelname)s] %(asctime)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug or debug_enabled() else logging.INFO)
    _logger = logger
    return logger
