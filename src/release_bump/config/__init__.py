"""Configuration management for release-bump."""

from __future__ import annotations

from release_bump.config.loader import load_config
from release_bump.config.models import CommitsConfig, ReleaseBumpConfig

__all__ = [
    "CommitsConfig",
    "ReleaseBumpConfig",
    "load_config",
]
