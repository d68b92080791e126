"""Commit records and the classified-commit containers.

Commits are supplied by the caller (oldest first) and never modified. The
engine produces :class:`ClassifiedCommit` copies that additionally carry the
resolved commit type and whether the commit forced a pre-release.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

# Commit types accepted for classification unless configured otherwise.
DEFAULT_ALLOWED_TYPES: tuple[str, ...] = (
    "feat",
    "fix",
    "chore",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
)


@dataclass(frozen=True)
class Commit:
    """A single commit as handed over by the caller.

    Attributes:
        id: Full commit hash
        short_id: Abbreviated hash (may equal ``id``)
        message: Raw, possibly multi-line commit message
        date: Commit timestamp, used for ``{numdate}``/``{unixtime}`` placeholders
    """

    id: str
    short_id: str
    message: str
    date: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class ClassifiedCommit(Commit):
    """A commit after classification."""

    type: str
    prerelease: bool = False

    @classmethod
    def from_commit(cls, commit: Commit, commit_type: str, *, prerelease: bool) -> ClassifiedCommit:
        return cls(
            id=commit.id,
            short_id=commit.short_id,
            message=commit.message,
            date=commit.date,
            type=commit_type,
            prerelease=prerelease,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "shortId": self.short_id,
            "message": self.message,
            "type": self.type,
            "prerelease": self.prerelease,
        }


class Category(StrEnum):
    """Release-note categories, in display order."""

    BREAKING_CHANGES = "breakingChanges"
    FEATURES = "features"
    FIXES = "fixes"
    OTHERS = "others"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    Category.BREAKING_CHANGES: "Breaking Changes",
    Category.FEATURES: "Features",
    Category.FIXES: "Bug Fixes",
    Category.OTHERS: "Other Changes",
}


@dataclass
class ClassifiedCommits:
    """Commits grouped by category, each list in batch order."""

    breaking_changes: list[ClassifiedCommit] = field(default_factory=list)
    features: list[ClassifiedCommit] = field(default_factory=list)
    fixes: list[ClassifiedCommit] = field(default_factory=list)
    others: list[ClassifiedCommit] = field(default_factory=list)

    @classmethod
    def from_entries(
        cls, entries: Iterable[tuple[Category, ClassifiedCommit]]
    ) -> ClassifiedCommits:
        """Group ``(category, commit)`` pairs, preserving their order."""
        grouped = cls()
        for category, commit in entries:
            grouped[category].append(commit)
        return grouped

    def __getitem__(self, category: Category) -> list[ClassifiedCommit]:
        match category:
            case Category.BREAKING_CHANGES:
                return self.breaking_changes
            case Category.FEATURES:
                return self.features
            case Category.FIXES:
                return self.fixes
            case Category.OTHERS:
                return self.others
        raise KeyError(category)

    def items(self) -> list[tuple[Category, list[ClassifiedCommit]]]:
        return [(category, self[category]) for category in Category]

    def __len__(self) -> int:
        return sum(len(commits) for _, commits in self.items())

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Serialize using the wire keys (``breakingChanges``, ``features``, ...)."""
        return {
            category.value: [commit.to_dict() for commit in commits]
            for category, commits in self.items()
        }
