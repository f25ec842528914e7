# SPDX-License-Identifier: MIT
"""Unit tests for format-driven version parsing."""

import logging

import pytest

from semver_tribe import (
    TAG_FORMAT,
    WILDCARD,
    Version,
    VersionRange,
    compile_pattern,
    parse_version,
)


class TestParseFormats:
    """Tests for parsing with different format strings."""

    @pytest.mark.parametrize(
        "text, fmt, expected",
        [
            ("v1.2.3", None, Version(1, 2, 3)),
            ("v1.2.3", TAG_FORMAT, Version(1, 2, 3)),
            ("0.10.100-b32", "%M.%m.%p%s", Version(0, 10, 100, "b32")),
            ("version:3-0-45", "version:%M-%m-%p", Version(3, 0, 45)),
            ("3$2^1", "%M$%m^%p", Version(3, 2, 1)),
            ("3$2^1-bla567", "%M$%m^%p%s", Version(3, 2, 1, "bla567")),
        ],
    )
    def test_formats(self, text, fmt, expected):
        assert parse_version(text, fmt) == expected

    def test_default_format(self):
        assert parse_version("v1.2.3") == Version(1, 2, 3)

    def test_special(self):
        assert parse_version("v1.2.3-rc.1") == Version(1, 2, 3, "rc.1")

    def test_large_numbers(self):
        assert parse_version("v999.888.777") == Version(999, 888, 777)

    def test_regex_characters_are_literal(self):
        """Test that regex metacharacters in the format match only themselves."""
        fmt = "(%M)[%m]{%p}*+?|"
        assert parse_version("(1)[2]{3}*+?|", fmt) == Version(1, 2, 3)
        assert parse_version("1223", fmt) is None

    def test_dot_is_not_a_wildcard(self):
        assert parse_version("v1a2b3") is None

    def test_searches_within_text(self):
        """Test that the format may match anywhere in the string."""
        assert parse_version("Release v2.0.1 (final)") == Version(2, 0, 1)

    def test_git_describe_suffix_ignored(self):
        """Test that a numeric suffix is not taken as a pre-release label."""
        assert parse_version("v1.2.3-4-gabc1234") == Version(1, 2, 3)

    def test_unmatched_special_is_empty(self):
        assert parse_version("v1.2.3-") == Version(1, 2, 3)

    def test_no_match_returns_none(self):
        assert parse_version("not a version") is None

    def test_too_few_parts_returns_none(self):
        assert parse_version("v1.2") is None

    def test_missing_prefix_returns_none(self):
        assert parse_version("1.2.3") is None

    def test_no_match_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="semver_tribe.pattern"):
            parse_version("garbage")
        assert "does not match" in caplog.text

    def test_unicode_digits_rejected(self):
        assert parse_version("v١.2.3") is None

    def test_repeated_placeholder_must_agree(self):
        assert parse_version("1.2.3/1", "%M.%m.%p/%M") == Version(1, 2, 3)
        assert parse_version("1.2.3/4", "%M.%m.%p/%M") is None


class TestAllowMissing:
    """Tests for components left out of the format."""

    @pytest.mark.parametrize(
        "text, fmt, expected",
        [
            ("v1", "v%M", Version(1, 0, 0)),
            ("v1", "v%m", Version(0, 1, 0)),
            ("v1", "v%p", Version(0, 0, 1)),
            ("v1.2", "v%M.%m", Version(1, 2, 0)),
            ("v1.2", "v%m.%p", Version(0, 1, 2)),
        ],
    )
    def test_missing_parts_default_to_zero(self, text, fmt, expected):
        assert parse_version(text, fmt) == expected
        assert parse_version(text, fmt, True) == expected

    @pytest.mark.parametrize(
        "text, fmt",
        [
            ("v1", "v%m"),
            ("v1", "v%p"),
            ("v1.2", "v%M.%m"),
            ("v1.2", "v%m.%p"),
        ],
    )
    def test_strict_mode_rejects_missing_parts(self, text, fmt):
        assert parse_version(text, fmt, allow_missing=False) is None

    def test_strict_mode_major_only_format(self):
        """Test that strict mode rejects a format with only %M, since minor and patch are absent."""
        assert parse_version("v1", "v%M", allow_missing=False) is None

    def test_strict_mode_complete_format(self):
        assert parse_version("v1.2.3", allow_missing=False) == Version(1, 2, 3)

    def test_strict_mode_special_optional(self):
        """Test that strict mode only requires the numeric parts."""
        assert parse_version("1.2.3", "%M.%m.%p", allow_missing=False) == Version(1, 2, 3)

    def test_strict_failure_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="semver_tribe.pattern"):
            parse_version("v1.2", "v%m.%p", allow_missing=False)
        assert "major" in caplog.text


class TestParseWildcards:
    """Tests for parsing version ranges."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("v1.2.x", VersionRange(1, 2, WILDCARD)),
            ("v1.x.x", VersionRange(1, WILDCARD, WILDCARD)),
            ("v1.x.x-beta", VersionRange(1, WILDCARD, WILDCARD, "beta")),
            ("vx.x.x", VersionRange(WILDCARD, WILDCARD, WILDCARD)),
        ],
    )
    def test_wildcards(self, text, expected):
        parsed = parse_version(text)
        assert parsed.is_wildcard is True
        assert parsed == expected

    def test_uppercase_wildcard(self):
        assert parse_version("v1.X.X") == VersionRange(1, WILDCARD, WILDCARD)

    def test_mixed_case_wildcard(self):
        assert parse_version("v1.2.X") == parse_version("v1.2.x")

    def test_plain_version_is_not_range(self):
        parsed = parse_version("v1.2.3")
        assert isinstance(parsed, Version)
        assert parsed.is_wildcard is False

    def test_wildcard_with_missing_parts(self):
        """Test that missing parts still default to zero beside a wildcard."""
        assert parse_version("1.x", "%M.%m") == VersionRange(1, WILDCARD, 0)

    def test_other_letters_are_not_wildcards(self):
        assert parse_version("v1.y.z") is None

    def test_round_trip_range(self):
        r = VersionRange(4, WILDCARD, WILDCARD, "rc1")
        assert parse_version(str(r)) == r


class TestCompilePattern:
    """Tests for compile_pattern."""

    def test_named_groups(self):
        regex = compile_pattern("v%M.%m.%p%s")
        assert set(regex.groupindex) == {"major", "minor", "patch", "special"}

    def test_absent_placeholders_have_no_group(self):
        regex = compile_pattern("v%m")
        assert set(regex.groupindex) == {"minor"}

    def test_cached(self):
        assert compile_pattern("r%M_%m_%p") is compile_pattern("r%M_%m_%p")

    def test_special_excludes_dash(self):
        match = compile_pattern("%M%s").search("3-beta")
        assert match.group("special") == "beta"
