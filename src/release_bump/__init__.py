"""release-bump: next semantic version and grouped release notes from conventional commits."""

from __future__ import annotations

import logging

from release_bump.core import BumpResult, ClassifiedCommits, Commit, bump
from release_bump.exceptions import ReleaseBumpError, VersionParseError

__version__ = "0.1.0"

__all__ = [
    "BumpResult",
    "ClassifiedCommits",
    "Commit",
    "ReleaseBumpError",
    "VersionParseError",
    "__version__",
    "bump",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
