"""Exception hierarchy for release-bump.

All errors raised on purpose derive from :class:`ReleaseBumpError` so callers
can catch the whole family at the CLI boundary. Malformed or irrelevant
commits are never errors: the engine skips them.
"""

from __future__ import annotations


class ReleaseBumpError(Exception):
    """Base class for all release-bump errors."""


class VersionParseError(ReleaseBumpError):
    """The base version is not a valid (loose) semantic version."""

    def __init__(self, version: str, reason: str | None = None) -> None:
        self.version = version
        self.reason = reason
        message = f"Failed to parse version {version!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConfigError(ReleaseBumpError):
    """Configuration could not be loaded."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml was found."""


class ConfigValidationError(ConfigError):
    """The configuration file is unreadable or holds invalid values."""


class CommitInputError(ReleaseBumpError):
    """Commit records handed to the CLI are malformed."""
