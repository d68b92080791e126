"""Final version string assembly.

The incremented core version is followed by the resolved version-suffix
template (``-<suffix>``) and build-metadata template (``+<build>``).

Supported placeholders, all resolved against one reference commit:

============== ==========================================
``{id}``       full commit hash
``{sha}``      full commit hash (alias of ``{id}``)
``{numdate}``  local time as ``YYYYMMDDHHMMSS``
``{unixtime}`` seconds since the epoch
============== ==========================================
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from release_bump.core.commits import Commit
    from release_bump.core.version import Version


def reference_time(reference: Commit | None, now: datetime | None = None) -> datetime:
    """Pick the timestamp used for date placeholders.

    The reference commit's own date wins; otherwise ``now`` (or the current
    time) is used. Aware datetimes are converted to local time.
    """
    if reference is not None and reference.date is not None:
        moment = reference.date
    else:
        moment = now if now is not None else datetime.now()
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment


def render_template(template: str, reference: Commit | None, moment: datetime) -> str:
    """Substitute placeholders in a suffix or build template.

    Args:
        template: Raw template text, e.g. ``"nightly.{numdate}"``
        reference: Commit supplying ``{id}``/``{sha}``
        moment: Time supplying ``{numdate}``/``{unixtime}``

    Returns:
        The template with all known placeholders replaced
    """
    commit_id = reference.id if reference is not None else ""
    replacements = {
        "{id}": commit_id,
        "{sha}": commit_id,
        "{numdate}": moment.strftime("%Y%m%d%H%M%S"),
        "{unixtime}": str(int(moment.timestamp())),
    }
    for placeholder, value in replacements.items():
        template = template.replace(placeholder, value)
    return template


def split_identifiers(text: str) -> list[str]:
    """Split a suffix/build string into dot-separated identifiers."""
    return [part for part in text.split(".") if part]


def format_version(
    version: Version,
    suffix_template: str | None,
    build_template: str | None,
    reference: Commit | None,
    *,
    now: datetime | None = None,
) -> str:
    """Render the final version string.

    Args:
        version: Incremented version (build metadata already cleared)
        suffix_template: Last version-suffix template seen in the batch
        build_template: Last build-metadata template seen in the batch
        reference: Commit used for placeholder substitution
        now: Fallback time when the reference commit carries no date

    Returns:
        e.g. ``"1.3.0"``, ``"1.2.4-0-nightly"`` or ``"2.0.0+20240102030405"``
    """
    text = str(version.without_build())
    if suffix_template is None and build_template is None:
        return text

    moment = reference_time(reference, now)
    if suffix_template is not None:
        suffix = split_identifiers(render_template(suffix_template, reference, moment))
        if suffix:
            text += "-" + ".".join(suffix)
    if build_template is not None:
        build = split_identifiers(render_template(build_template, reference, moment))
        if build:
            text += "+" + ".".join(build)
    return text
