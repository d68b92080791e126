"""Configuration loading from pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from release_bump.config.models import ReleaseBumpConfig
from release_bump.exceptions import ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)

TOOL_SECTION = "release-bump"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml in ``start`` or any of its parents.

    Args:
        start: Directory to search from (defaults to the working directory)

    Returns:
        Path to the nearest pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the filesystem root
    """
    start = (start or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate

    raise ConfigNotFoundError(f"No pyproject.toml found in {start} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Read and parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Configuration file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_release_bump_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.release-bump]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_SECTION, {})


def load_config(path: Path | None = None) -> ReleaseBumpConfig:
    """Load and validate configuration.

    Args:
        path: Project directory or pyproject.toml path

    Returns:
        Validated configuration; defaults when the section is absent

    Raises:
        ConfigNotFoundError: If no pyproject.toml can be found
        ConfigValidationError: If the configuration is invalid
    """
    pyproject_path = path if path is not None and path.is_file() else find_pyproject_toml(path)
    logger.debug("Loading configuration from %s", pyproject_path)

    data = extract_release_bump_config(load_pyproject_toml(pyproject_path))
    try:
        return ReleaseBumpConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_SECTION}] configuration: {e}") from e
