"""Tests for release directive scanning."""

from __future__ import annotations

import pytest

from release_bump.core.directives import Directives, scan_directives


class TestForcePrerelease:
    """Tests for bracketed pre-release markers."""

    @pytest.mark.parametrize(
        "message",
        [
            "feat: add x [alpha]",
            "fix: y [beta]",
            "chore: release [rc]",
            "chore: [prerelease] cut",
            "chore: cut [v:beta]",
            "chore: cut [V:RC]",
            "chore: cut [ALPHA]",
            "chore: cut\n\nShip it as [beta] please",
        ],
    )
    def test_marker_detected(self, message: str):
        """Markers are found anywhere, case-insensitively."""
        assert scan_directives(message).force_prerelease

    @pytest.mark.parametrize(
        "message",
        [
            "feat: add alpha channel",
            "fix: y [gamma]",
            "chore: cut [v:]",
            "chore: cut (beta)",
            "chore: cut [ beta ]",
        ],
    )
    def test_marker_not_detected(self, message: str):
        """Unbracketed or unknown tokens are ignored."""
        assert not scan_directives(message).force_prerelease


class TestTemplates:
    """Tests for Version-suffix and Build-metadata lines."""

    def test_version_suffix(self):
        """The text after the key is captured verbatim."""
        directives = scan_directives("chore: nightly\n\nVersion-suffix: nightly.{id}")

        assert directives.version_suffix_template == "nightly.{id}"
        assert directives.build_metadata_template is None
        assert directives.has_templates

    def test_build_metadata(self):
        """Build metadata templates are captured."""
        directives = scan_directives("chore: ci\n\nSome text\nBuild-metadata: {numdate}\n")

        assert directives.build_metadata_template == "{numdate}"

    def test_keys_are_case_insensitive(self):
        """Key spelling does not matter."""
        directives = scan_directives("chore: x\n\nVERSION-SUFFIX: rc\nbuild-metadata: ci.7")

        assert directives.version_suffix_template == "rc"
        assert directives.build_metadata_template == "ci.7"

    def test_first_occurrence_wins(self):
        """Within one message the first line is used."""
        directives = scan_directives("chore: x\n\nVersion-suffix: one\nVersion-suffix: two")

        assert directives.version_suffix_template == "one"

    def test_header_line_is_not_a_directive(self):
        """Templates must appear below the header."""
        assert scan_directives("Version-suffix: nightly").version_suffix_template is None

    def test_empty_template_ignored(self):
        """A key without text is not a directive."""
        directives = scan_directives("chore: x\n\nBuild-metadata:   \n")

        assert directives.build_metadata_template is None
        assert not directives.has_templates

    def test_key_must_start_the_line(self):
        """Keys in the middle of a line are ignored."""
        directives = scan_directives("chore: x\n\nsee Version-suffix: nope")

        assert directives.version_suffix_template is None

    def test_crlf_line_endings(self):
        """Carriage returns are trimmed from templates."""
        directives = scan_directives("chore: x\r\n\r\nVersion-suffix: rc.1\r\n")

        assert directives.version_suffix_template == "rc.1"

    def test_no_directives(self):
        """Plain messages carry no directives."""
        assert scan_directives("feat: add x\n\nLonger description.") == Directives()
