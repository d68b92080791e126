"""Semantic version parsing and incrementing.

Versions are parsed loosely (a leading ``v`` or ``=``, surrounding whitespace,
a missing hyphen before the pre-release and zero-padded numbers are tolerated)
and always rendered in canonical ``MAJOR.MINOR.PATCH[-PRE][+BUILD]`` form.

Increments follow the npm ``semver`` rules so that results stay compatible
with existing release histories:

- ``1.2.3`` + major -> ``2.0.0``, but ``2.0.0-1`` + major -> ``2.0.0``
- ``1.2.3`` + premajor -> ``2.0.0-0``
- ``1.2.3`` + prerelease -> ``1.2.4-0``; ``1.2.4-beta.1`` -> ``1.2.4-beta.2``
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import StrEnum

from release_bump.exceptions import VersionParseError

_NUMERIC = re.compile(r"^\d+$")

_LOOSE_VERSION = re.compile(
    r"""
    ^[v=\s]*
    (?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)
    (?:-?(?P<prerelease>
        (?:\d+|\d*[a-zA-Z-][a-zA-Z0-9-]*)
        (?:\.(?:\d+|\d*[a-zA-Z-][a-zA-Z0-9-]*))*
    ))?
    (?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?
    $
    """,
    re.VERBOSE,
)


class BumpType(StrEnum):
    """Version increment kinds."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PREMAJOR = "premajor"
    PREMINOR = "preminor"
    PREPATCH = "prepatch"
    PRERELEASE = "prerelease"

    @classmethod
    def for_tier(cls, tier: BumpType, *, prerelease: bool) -> BumpType:
        """Return the pre-release flavour of a core tier when requested.

        Args:
            tier: One of MAJOR, MINOR or PATCH
            prerelease: Whether a pre-release was forced

        Returns:
            ``tier`` itself, or PREMAJOR/PREMINOR/PREPATCH
        """
        if not prerelease:
            return tier
        return cls(f"pre{tier.value}")


def _normalize_identifier(identifier: str) -> str:
    # Numeric identifiers are compared as numbers, so "01" and "1" are equal.
    if _NUMERIC.match(identifier):
        return str(int(identifier))
    return identifier


@dataclass(frozen=True)
class Version:
    """A semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release identifiers, e.g. ``("beta", "1")``
        build: Build metadata identifiers
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = field(default_factory=tuple)
    build: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a loose semantic version string.

        Args:
            text: Version string such as ``"1.2.3"``, ``"v1.2.3-rc.1"``
                or ``"=1.2.3+build.5"``

        Returns:
            Parsed version

        Raises:
            VersionParseError: If the text is not a semantic version
        """
        if not isinstance(text, str):
            raise VersionParseError(repr(text), "expected a string")

        match = _LOOSE_VERSION.match(text.strip())
        if match is None:
            raise VersionParseError(text)

        prerelease = match.group("prerelease")
        build = match.group("build")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=tuple(_normalize_identifier(p) for p in prerelease.split("."))
            if prerelease
            else (),
            build=tuple(build.split(".")) if build else (),
        )

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    @property
    def core(self) -> str:
        """The ``MAJOR.MINOR.PATCH`` triple as a string."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def without_build(self) -> Version:
        """Return a copy with build metadata removed."""
        return replace(self, build=())

    def bump(self, bump_type: BumpType) -> Version:
        """Return the version incremented by ``bump_type``.

        Build metadata is always dropped.

        Args:
            bump_type: Increment to apply

        Returns:
            New version
        """
        match bump_type:
            case BumpType.MAJOR:
                if self.minor != 0 or self.patch != 0 or not self.prerelease:
                    return Version(self.major + 1, 0, 0)
                return Version(self.major, 0, 0)
            case BumpType.MINOR:
                if self.patch != 0 or not self.prerelease:
                    return Version(self.major, self.minor + 1, 0)
                return Version(self.major, self.minor, 0)
            case BumpType.PATCH:
                if not self.prerelease:
                    return Version(self.major, self.minor, self.patch + 1)
                return Version(self.major, self.minor, self.patch)
            case BumpType.PREMAJOR:
                return Version(self.major + 1, 0, 0, ("0",))
            case BumpType.PREMINOR:
                return Version(self.major, self.minor + 1, 0, ("0",))
            case BumpType.PREPATCH:
                return Version(self.major, self.minor, self.patch + 1, ("0",))
            case BumpType.PRERELEASE:
                if not self.prerelease:
                    return self.bump(BumpType.PREPATCH)
                return replace(self, prerelease=_increment_prerelease(self.prerelease), build=())

        raise ValueError(f"Unknown bump type: {bump_type!r}")

    def __str__(self) -> str:
        text = self.core
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


def _increment_prerelease(identifiers: tuple[str, ...]) -> tuple[str, ...]:
    """Increment the right-most numeric identifier, or append ``0``."""
    parts = list(identifiers)
    for index in range(len(parts) - 1, -1, -1):
        if _NUMERIC.match(parts[index]):
            parts[index] = str(int(parts[index]) + 1)
            return tuple(parts)
    parts.append("0")
    return tuple(parts)


def parse_version(text: str) -> Version:
    """Parse a version string. Shorthand for :meth:`Version.parse`."""
    return Version.parse(text)
