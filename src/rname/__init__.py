# SPDX-FileCopyrightText: 2025-present rname contributors
#
# SPDX-License-Identifier: MIT

"""rname - Rename TV and movie files for Plex, with the help of TMDb."""

from rname.__about__ import __version__

__all__ = ["__version__"]
