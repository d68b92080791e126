"""Core business logic for release-bump.

This module contains the fundamental building blocks:
- Semantic version parsing and incrementing (npm semver compatible)
- Conventional commit header parsing
- Release directive scanning ([beta], Version-suffix, Build-metadata)
- Commit classification and version bumping
"""

from __future__ import annotations

from release_bump.core.commits import (
    DEFAULT_ALLOWED_TYPES,
    Category,
    ClassifiedCommit,
    ClassifiedCommits,
    Commit,
)
from release_bump.core.directives import Directives, scan_directives
from release_bump.core.engine import BumpResult, BumpState, apply_commit, bump
from release_bump.core.formatter import format_version
from release_bump.core.header import ParsedHeader, parse_header
from release_bump.core.version import BumpType, Version, parse_version

__all__ = [
    # Commits
    "DEFAULT_ALLOWED_TYPES",
    # Version
    "BumpType",
    # Engine
    "BumpResult",
    "BumpState",
    "Category",
    "ClassifiedCommit",
    "ClassifiedCommits",
    "Commit",
    # Directives
    "Directives",
    # Header
    "ParsedHeader",
    "Version",
    "apply_commit",
    "bump",
    # Formatter
    "format_version",
    "parse_header",
    "parse_version",
    "scan_directives",
]
