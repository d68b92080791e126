"""Release directives embedded in commit messages.

Three independent markers are recognized:

- ``[alpha]``, ``[beta]``, ``[rc]``, ``[prerelease]`` (optionally written
  ``[v:beta]``), anywhere in the message, force a pre-release increment.
- ``Version-suffix: <template>`` on a body line sets the pre-release suffix.
- ``Build-metadata: <template>`` on a body line sets the build metadata.

Keys and bracket tokens are case-insensitive. Templates are captured verbatim;
placeholder substitution happens in :mod:`release_bump.core.formatter`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from release_bump.core.header import split_message

PRERELEASE_PATTERN = re.compile(r"\[(?:v:)?(?:alpha|beta|rc|prerelease)\]", re.IGNORECASE)
VERSION_SUFFIX_PATTERN = re.compile(r"^Version-suffix: (.*)$", re.IGNORECASE | re.MULTILINE)
BUILD_METADATA_PATTERN = re.compile(r"^Build-metadata: (.*)$", re.IGNORECASE | re.MULTILINE)


@dataclass(frozen=True)
class Directives:
    force_prerelease: bool = False
    version_suffix_template: str | None = None
    build_metadata_template: str | None = None

    @property
    def has_templates(self) -> bool:
        return self.version_suffix_template is not None or self.build_metadata_template is not None


def _find_template(pattern: re.Pattern[str], body: str) -> str | None:
    match = pattern.search(body)
    if match is None:
        return None
    template = match.group(1).strip()
    return template or None


def scan_directives(message: str) -> Directives:
    """Scan a commit message for release directives.

    Args:
        message: Full commit message

    Returns:
        The directives found; all fields empty when there are none
    """
    _, body = split_message(message)
    return Directives(
        force_prerelease=PRERELEASE_PATTERN.search(message) is not None,
        version_suffix_template=_find_template(VERSION_SUFFIX_PATTERN, body),
        build_metadata_template=_find_template(BUILD_METADATA_PATTERN, body),
    )
