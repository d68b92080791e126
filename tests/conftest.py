"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import pytest

from release_bump.core.commits import Commit

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def make_commit(message: str, sha: str = "abc1234def5678", date: datetime | None = None) -> Commit:
    """Build a commit with a short id derived from ``sha``."""
    return Commit(id=sha, short_id=sha[:7], message=message, date=date)


@pytest.fixture
def commit_factory() -> Callable[..., Commit]:
    """Factory producing commits with unique ids."""
    counter = iter(range(1, 10_000))

    def factory(message: str, date: datetime | None = None) -> Commit:
        sha = f"{next(counter):07x}" + "0" * 33
        return make_commit(message, sha=sha, date=date)

    return factory


@pytest.fixture
def feat_commit() -> Commit:
    return make_commit("feat: add user authentication", sha="feat1234567890")


@pytest.fixture
def fix_commit() -> Commit:
    return make_commit("fix(core): handle null response", sha="fix12345678901")


@pytest.fixture
def breaking_commit() -> Commit:
    return make_commit(
        "feat(api)!: redesign endpoints\n\nBREAKING CHANGE: /v1 routes removed",
        sha="break123456789",
    )


@pytest.fixture
def sample_commits(
    feat_commit: Commit, fix_commit: Commit, breaking_commit: Commit
) -> list[Commit]:
    """A realistic batch, oldest first."""
    return [
        make_commit("docs: update readme", sha="docs1234567890"),
        fix_commit,
        make_commit("Merge branch 'main' into feature", sha="merge123456789"),
        feat_commit,
        make_commit("chore(deps): bump pydantic", sha="chore123456789"),
        make_commit("ci: cache dependencies", sha="ci12345678901"),
        breaking_commit,
    ]


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project directory with a minimal pyproject.toml."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"
"""
    )
    return tmp_path
