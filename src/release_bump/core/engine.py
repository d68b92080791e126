"""Commit classification and version bump engine.

The batch is folded commit by commit into an immutable :class:`BumpState`.
Each commit is placed in exactly one category and may increment the version,
subject to the following tiers (highest first):

1. breaking change (``!`` or ``BREAKING CHANGE:``) -> major
2. ``feat`` -> minor
3. ``fix`` -> patch
4. forced pre-release or version/build template -> bare prerelease

Every tier fires at most once per batch, and a lower tier never fires after
a higher one has. Increments are applied in batch order and never undone, so
``fix`` followed by ``feat!`` yields a patch increment and then a major one.
A ``[alpha]``-style marker turns a tier increment into its pre-release form.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import partial, reduce
from typing import TYPE_CHECKING

from release_bump.core.commits import (
    DEFAULT_ALLOWED_TYPES,
    Category,
    ClassifiedCommit,
    ClassifiedCommits,
)
from release_bump.core.directives import scan_directives
from release_bump.core.formatter import format_version
from release_bump.core.header import parse_header
from release_bump.core.version import BumpType, Version

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable
    from datetime import datetime

    from release_bump.config.models import CommitsConfig
    from release_bump.core.commits import Commit
    from release_bump.core.header import ParsedHeader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    category: Category
    commit: ClassifiedCommit
    previous: _Entry | None = None


@dataclass(frozen=True)
class BumpState:
    """Accumulator threaded through the fold.

    Attributes:
        version: Version after the increments applied so far
        major_done: A major/premajor increment fired in this batch
        minor_done: A minor/preminor increment fired in this batch
        patch_done: A patch/prepatch increment fired in this batch
        prerelease_done: A bare prerelease increment fired in this batch
        suffix_template: Last version-suffix template seen
        build_template: Last build-metadata template seen
        history: Classified commits, newest first, as a linked chain
    """

    version: Version
    major_done: bool = False
    minor_done: bool = False
    patch_done: bool = False
    prerelease_done: bool = False
    suffix_template: str | None = None
    build_template: str | None = None
    history: _Entry | None = None

    @classmethod
    def initial(cls, base: Version) -> BumpState:
        """Start a batch from ``base``; its build metadata is discarded."""
        return cls(version=base.without_build())

    @property
    def entries(self) -> tuple[tuple[Category, ClassifiedCommit], ...]:
        """``(category, commit)`` pairs in batch order."""
        pairs = []
        link = self.history
        while link is not None:
            pairs.append((link.category, link.commit))
            link = link.previous
        return tuple(reversed(pairs))

    def record(self, category: Category, commit: ClassifiedCommit) -> BumpState:
        return replace(self, history=_Entry(category, commit, self.history))


@dataclass(frozen=True)
class BumpResult:
    """Outcome of :func:`bump`.

    Attributes:
        updated_version: Final version string including suffix/build
        classified_commits: Accepted commits grouped by category
        version: Incremented version without suffix/build templates
        base_version: The parsed base version
    """

    updated_version: str
    classified_commits: ClassifiedCommits
    version: Version
    base_version: Version

    @property
    def changed(self) -> bool:
        """Whether the release version differs from the base version."""
        return self.updated_version != str(self.base_version.without_build())


def _increment(state: BumpState, bump_type: BumpType, **flags: bool) -> BumpState:
    new_version = state.version.bump(bump_type)
    logger.debug("Applying %s increment: %s -> %s", bump_type, state.version, new_version)
    return replace(state, version=new_version, **flags)


def _apply_tier(
    state: BumpState, header: ParsedHeader, force_prerelease: bool
) -> tuple[BumpState, Category | None]:
    """Place a commit on the tier ladder, incrementing when the tier is still open."""
    if header.breaking:
        if not state.major_done:
            bump_type = BumpType.for_tier(BumpType.MAJOR, prerelease=force_prerelease)
            state = _increment(state, bump_type, major_done=True)
        return state, Category.BREAKING_CHANGES

    if header.type == "feat":
        if not (state.major_done or state.minor_done):
            bump_type = BumpType.for_tier(BumpType.MINOR, prerelease=force_prerelease)
            state = _increment(state, bump_type, minor_done=True)
        return state, Category.FEATURES

    if header.type == "fix":
        if not (state.major_done or state.minor_done or state.patch_done):
            bump_type = BumpType.for_tier(BumpType.PATCH, prerelease=force_prerelease)
            state = _increment(state, bump_type, patch_done=True)
        return state, Category.FIXES

    return state, None


def _bump_prerelease(state: BumpState) -> BumpState:
    # Lowest tier: closed once any other tier has fired.
    if state.prerelease_done or state.major_done or state.minor_done or state.patch_done:
        return state
    return _increment(state, BumpType.PRERELEASE, prerelease_done=True)


def apply_commit(state: BumpState, commit: Commit, allowed_types: Collection[str]) -> BumpState:
    """Fold one commit into the batch state.

    Commits with an unparseable header or a type outside ``allowed_types``
    leave the state untouched.

    Args:
        state: State after the previous commits
        commit: Next commit in batch order
        allowed_types: Lowercase commit types accepted for classification

    Returns:
        The new state
    """
    header = parse_header(commit.message)
    if header is None:
        logger.debug("Skipping %s: not a conventional commit header", commit.short_id)
        return state
    if header.type not in allowed_types:
        logger.debug("Skipping %s: type %r is not allowed", commit.short_id, header.type)
        return state

    directives = scan_directives(commit.message)
    state, category = _apply_tier(state, header, directives.force_prerelease)
    prerelease = directives.force_prerelease

    if category is None and (directives.force_prerelease or directives.has_templates):
        state = _bump_prerelease(state)
        category, prerelease = Category.OTHERS, True
    elif category is None:
        category, prerelease = Category.OTHERS, False

    if directives.version_suffix_template is not None:
        state = replace(state, suffix_template=directives.version_suffix_template)
    if directives.build_metadata_template is not None:
        state = replace(state, build_template=directives.build_metadata_template)

    classified = ClassifiedCommit.from_commit(commit, header.type, prerelease=prerelease)
    return state.record(category, classified)


def bump(
    base_version: str,
    commits: Iterable[Commit],
    config: CommitsConfig | None = None,
    *,
    now: datetime | None = None,
) -> BumpResult:
    """Compute the next version and classify a batch of commits.

    Args:
        base_version: Last released version (loose semver)
        commits: Commits since that release, oldest first
        config: Commit configuration; defaults to the built-in allow-list
        now: Time used for date placeholders when the reference commit has
            no date

    Returns:
        The updated version and the classified commits

    Raises:
        VersionParseError: If ``base_version`` is not a valid version
    """
    base = Version.parse(base_version)
    allowed_types = frozenset(
        config.allowed_types if config is not None else DEFAULT_ALLOWED_TYPES
    )
    batch = list(commits)

    step = partial(apply_commit, allowed_types=allowed_types)
    state = reduce(step, batch, BumpState.initial(base))

    # Placeholders always resolve against the oldest commit of the batch.
    reference = batch[0] if batch else None
    updated_version = format_version(
        state.version,
        state.suffix_template,
        state.build_template,
        reference,
        now=now,
    )
    logger.debug("Version %s -> %s (%d commits)", base, updated_version, len(batch))

    return BumpResult(
        updated_version=updated_version,
        classified_commits=ClassifiedCommits.from_entries(state.entries),
        version=state.version,
        base_version=base,
    )
