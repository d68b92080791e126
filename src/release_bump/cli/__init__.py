"""Command-line interface for release-bump."""

from __future__ import annotations

from release_bump.cli.app import app

__all__ = ["app"]
