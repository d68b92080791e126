"""Tests for final version string assembly."""

from __future__ import annotations

from datetime import UTC, datetime

from release_bump.core.commits import Commit
from release_bump.core.formatter import (
    format_version,
    reference_time,
    render_template,
    split_identifiers,
)
from release_bump.core.version import Version

REFERENCE = Commit(
    id="0123456789abcdef0123456789abcdef01234567",
    short_id="0123456",
    message="chore: release",
    date=datetime(2024, 1, 2, 3, 4, 5),
)


class TestRenderTemplate:
    """Tests for render_template()."""

    def test_id_and_sha(self):
        """{id} and {sha} both resolve to the full commit id."""
        moment = datetime(2024, 1, 2, 3, 4, 5)

        assert render_template("{id}", REFERENCE, moment) == REFERENCE.id
        assert render_template("{sha}", REFERENCE, moment) == REFERENCE.id

    def test_numdate(self):
        """{numdate} is a 14-digit local timestamp."""
        moment = datetime(2024, 1, 2, 3, 4, 5)

        assert render_template("{numdate}", REFERENCE, moment) == "20240102030405"

    def test_unixtime(self):
        """{unixtime} is seconds since the epoch."""
        moment = datetime(2024, 1, 1, tzinfo=UTC)

        assert render_template("{unixtime}", REFERENCE, moment) == "1704067200"

    def test_unknown_placeholders_untouched(self):
        """Only the supported placeholders are substituted."""
        moment = datetime(2024, 1, 2, 3, 4, 5)

        assert render_template("ci.{branch}", REFERENCE, moment) == "ci.{branch}"

    def test_repeated_placeholders(self):
        """Every occurrence is replaced."""
        moment = datetime(2024, 1, 2, 3, 4, 5)

        assert render_template("{numdate}.{numdate}", REFERENCE, moment) == (
            "20240102030405.20240102030405"
        )


class TestReferenceTime:
    """Tests for reference_time()."""

    def test_commit_date_wins(self):
        """The reference commit's date is used when present."""
        assert reference_time(REFERENCE, datetime(2030, 1, 1)) == datetime(2024, 1, 2, 3, 4, 5)

    def test_falls_back_to_now(self):
        """Without a commit date the supplied time is used."""
        undated = Commit(id="abc", short_id="abc", message="chore: x")

        assert reference_time(undated, datetime(2030, 5, 6, 7, 8, 9)) == datetime(
            2030, 5, 6, 7, 8, 9
        )

    def test_aware_dates_become_local(self):
        """Aware datetimes are converted to local time."""
        moment = reference_time(None, datetime(2024, 1, 1, tzinfo=UTC))

        assert moment.timestamp() == 1704067200
        assert moment.tzinfo is not None


class TestFormatVersion:
    """Tests for format_version()."""

    def test_plain_version(self):
        """Without templates the core version is returned."""
        assert format_version(Version(1, 2, 3), None, None, REFERENCE) == "1.2.3"

    def test_prerelease_kept(self):
        """Pre-release identifiers of the core version are kept."""
        assert format_version(Version(1, 2, 4, ("0",)), None, None, None) == "1.2.4-0"

    def test_build_metadata(self):
        """Build metadata is appended after a plus sign."""
        result = format_version(Version(1, 2, 4, ("0",)), None, "{numdate}", REFERENCE)

        assert result == "1.2.4-0+20240102030405"

    def test_version_suffix(self):
        """A suffix is appended after a hyphen."""
        result = format_version(Version(1, 3, 0), "nightly.{id}", None, REFERENCE)

        assert result == f"1.3.0-nightly.{REFERENCE.id}"

    def test_suffix_and_build(self):
        """Suffix precedes build metadata."""
        result = format_version(Version(2, 0, 0), "rc", "sha.{sha}", REFERENCE)

        assert result == f"2.0.0-rc+sha.{REFERENCE.id}"

    def test_now_used_without_commit_date(self):
        """The fallback time feeds date placeholders."""
        undated = Commit(id="abc", short_id="abc", message="chore: x")
        result = format_version(
            Version(1, 0, 0), None, "{numdate}", undated, now=datetime(2030, 5, 6, 7, 8, 9)
        )

        assert result == "1.0.0+20300506070809"

    def test_existing_build_is_replaced(self):
        """Build metadata on the input version is never carried over."""
        version = Version(1, 2, 3, build=("old",))

        assert format_version(version, None, None, None) == "1.2.3"
        assert format_version(version, None, "new", None) == "1.2.3+new"

    def test_empty_identifiers_dropped(self):
        """Empty dot-separated identifiers are removed."""
        assert format_version(Version(1, 0, 0), None, "a..b.", None) == "1.0.0+a.b"


class TestSplitIdentifiers:
    """Tests for split_identifiers()."""

    def test_split(self):
        assert split_identifiers("nightly.20240102.abc") == ["nightly", "20240102", "abc"]

    def test_empty(self):
        assert split_identifiers("") == []
