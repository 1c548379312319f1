"""Core functionality for rname.

This package holds the pure rename engine and the execution layer around it.
- parser: classifies video and subtitle files and extracts fields from names.
- planner / tv_planner: compute ordered rename plans from parsed files and
  resolved metadata.
- purge: computes which leftover entries may be deleted.
- scanner / apply: the directory walk and the filesystem side of a run.
"""

from rname.core.planner import create_movie_plan, rename_basis
from rname.core.purge import purge_candidates
from rname.core.tv_planner import create_tv_plan, validate_single_season

__all__ = [
    "create_movie_plan",
    "create_tv_plan",
    "purge_candidates",
    "rename_basis",
    "validate_single_season",
]
