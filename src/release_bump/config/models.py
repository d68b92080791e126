"""Configuration models.

Configuration lives in ``pyproject.toml``::

    [tool.release-bump.commits]
    allowed_types = ["feat", "fix", "chore", "docs"]

All sections are optional; missing values fall back to the defaults below.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from release_bump.core.commits import DEFAULT_ALLOWED_TYPES


class CommitsConfig(BaseModel):
    """Commit classification settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    allowed_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_TYPES),
        description="Commit types taken into account; all others are ignored.",
    )

    @field_validator("allowed_types")
    @classmethod
    def _normalize_types(cls, value: list[str]) -> list[str]:
        normalized: list[str] = []
        for item in value:
            commit_type = item.strip().lower()
            if commit_type and commit_type not in normalized:
                normalized.append(commit_type)
        if not normalized:
            raise ValueError("allowed_types must contain at least one commit type")
        return normalized

    @classmethod
    def from_csv(cls, text: str) -> CommitsConfig | None:
        """Build a config from a comma-separated type list.

        Returns ``None`` for an empty list so callers keep their defaults.
        """
        types = [part for part in text.split(",") if part.strip()]
        if not types:
            return None
        return cls(allowed_types=types)


class ReleaseBumpConfig(BaseModel):
    """Root configuration from ``[tool.release-bump]``."""

    model_config = ConfigDict(extra="forbid")

    commits: CommitsConfig = Field(default_factory=CommitsConfig)
