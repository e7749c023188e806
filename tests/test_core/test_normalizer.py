"""Unit tests for depgrammar.core.normalizer.

Test Coverage:
- Classical and date-based version normalization
- Stability modifier expansion and dev markers
- Main branch, dev- branch and numeric branch handling
- Alias handling and alias-aware error messages
- The swallowed branch fallback error
- Non-idempotence of normalization
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from depgrammar.core.normalizer import normalize, normalize_branch
from depgrammar.exceptions import InvalidVersionError


@pytest.mark.unit
class TestNormalize:
    """Tests for normalize on valid input."""

    @pytest.mark.parametrize(
        "version, expected",
        [
            ("1.0.0", "1.0.0.0"),
            ("1.2.3.4", "1.2.3.4"),
            ("1.0", "1.0.0.0"),
            ("0", "0.0.0.0"),
            ("v2", "2.0.0.0"),
            ("v1.0.0", "1.0.0.0"),
            ("  1.0  ", "1.0.0.0"),
            ("1.0.0RC1dev", "1.0.0.0-RC1-dev"),
            ("1.0.0-rC15-dev", "1.0.0.0-RC15-dev"),
            ("1.0.0.RC.15-dev", "1.0.0.0-RC15-dev"),
            ("1.0.0-rc1", "1.0.0.0-RC1"),
            ("1.0.0.pl3-dev", "1.0.0.0-patch3-dev"),
            ("1.0-dev", "1.0.0.0-dev"),
            ("1.0.0-beta2", "1.0.0.0-beta2"),
            ("10.4.13-beta", "10.4.13.0-beta"),
            ("10.4.13beta2", "10.4.13.0-beta2"),
            ("10.4.13-b", "10.4.13.0-beta"),
            ("10.4.13-b5", "10.4.13.0-beta5"),
            ("1.0.0-a3", "1.0.0.0-alpha3"),
            ("1.0.0-stable", "1.0.0.0"),
        ],
    )
    def test_classical_versions(self, version: str, expected: str) -> None:
        """Test classical versions are padded to four segments."""
        assert normalize(version) == expected

    @pytest.mark.parametrize(
        "version, expected",
        [
            ("v20100102", "20100102"),
            ("2010.01", "2010-01"),
            ("2010.01.02", "2010-01-02"),
            ("2010-01-02", "2010-01-02"),
            ("2010-01-02.5", "2010-01-02-5"),
            ("20100102-203040", "20100102-203040"),
            ("20100102203040-10", "20100102203040-10"),
            ("20100102-203040-p1", "20100102-203040-patch1"),
            ("2010.01.02-dev", "2010-01-02-dev"),
        ],
    )
    def test_date_versions(self, version: str, expected: str) -> None:
        """Test date versions keep their digits with dash separators."""
        assert normalize(version) == expected

    @pytest.mark.parametrize(
        "version",
        ["master", "trunk", "default", "dev-master", "dev-trunk", "Dev-Default", "MASTER"],
    )
    def test_main_branches(self, version: str) -> None:
        """Test every main branch spelling collapses to the sentinel."""
        assert normalize(version) == "9999999-dev"

    def test_master_and_dev_master_agree(self) -> None:
        """Test dev-master and master normalize identically."""
        assert normalize("dev-master") == normalize("master") == "9999999-dev"

    @pytest.mark.parametrize(
        "version, expected",
        [
            ("dev-feature-foo", "dev-feature-foo"),
            ("DEV-FOOBAR", "dev-FOOBAR"),
            ("dev-1.0", "dev-1.0"),
            ("dev-feature/foo bar", "dev-feature/foo bar"),
        ],
    )
    def test_dev_prefixed_branches_are_kept_verbatim(
        self, version: str, expected: str
    ) -> None:
        """Test dev- branches are returned without further validation."""
        assert normalize(version) == expected

    @pytest.mark.parametrize(
        "version, expected",
        [
            ("1.x-dev", "1.9999999.9999999.9999999-dev"),
            ("2.1.x-dev", "2.1.9999999.9999999-dev"),
            ("2.1-dev.x-dev", "dev-2.1-dev.x"),
            ("1.0.3.*-dev", "1.0.3.9999999-dev"),
            ("feature-dev", "dev-feature"),
            ("master-dev", "9999999-dev"),
        ],
    )
    def test_dev_suffixed_branches(self, version: str, expected: str) -> None:
        """Test a trailing dev marker routes through branch normalization."""
        assert normalize(version) == expected

    def test_alias_is_ignored(self) -> None:
        """Test only the alias source is normalized."""
        assert normalize("dev-master as 1.0.0") == "9999999-dev"
        assert normalize("1.0.x-dev as 1.0.0") == "1.0.9999999.9999999-dev"


@pytest.mark.unit
class TestNormalizeErrors:
    """Tests for normalize failures."""

    @pytest.mark.parametrize(
        "version",
        ["", "a", "1.0.0-meh", "1.0.0.0.0", "feature-foo", "1.0 .2", "1.0.0+build"],
    )
    def test_invalid_versions_raise(self, version: str) -> None:
        """Test strings matching no grammar raise InvalidVersionError."""
        with pytest.raises(InvalidVersionError) as exc_info:
            normalize(version)

        assert exc_info.value.version == version.strip()
        assert exc_info.value.message == f'Invalid version string "{version.strip()}"'

    @pytest.mark.parametrize(
        "version",
        ["١.٢", "１.０.０", "1.٢", "v२", "٢010-01-02"],
    )
    def test_non_ascii_digits_raise(self, version: str) -> None:
        """Test digits outside 0-9 are not version segments."""
        with pytest.raises(InvalidVersionError):
            normalize(version)

    def test_alias_source_hint(self) -> None:
        """Test a branch-like alias source suggests the dev- prefix."""
        with pytest.raises(InvalidVersionError) as exc_info:
            normalize("foo as 1.0")

        assert exc_info.value.message == (
            'Invalid version string "foo" in "foo as 1.0", the alias source must be '
            "an exact version, if it is a branch name you should prefix it with dev-"
        )
        assert exc_info.value.full_version == "foo as 1.0"

    def test_alias_target_hint(self) -> None:
        """Test a non-version alias target is reported as such."""
        with pytest.raises(InvalidVersionError) as exc_info:
            normalize("foo", "1.0 as foo")

        assert exc_info.value.message == (
            'Invalid version string "foo" in "1.0 as foo", '
            "the alias must be an exact version"
        )

    def test_no_hint_without_alias(self) -> None:
        """Test the plain message is used when no alias is involved."""
        with pytest.raises(InvalidVersionError, match='^Invalid version string "foo"$'):
            normalize("foo")

    def test_branch_fallback_error_is_swallowed(self) -> None:
        """Test a failing branch fallback surfaces the generic error only."""
        inner = InvalidVersionError("inner failure")

        with patch(
            "depgrammar.core.normalizer.normalize_branch", side_effect=inner
        ) as mock_branch:
            with pytest.raises(InvalidVersionError) as exc_info:
                normalize("feature-dev")

        mock_branch.assert_called_once_with("feature")
        assert exc_info.value is not inner
        assert exc_info.value.message == 'Invalid version string "feature-dev"'


@pytest.mark.unit
class TestNormalizeIdempotence:
    """Normalization is not idempotent in general."""

    def test_uppercase_stable_is_not_idempotent(self) -> None:
        """Test the case-sensitive stable shortcut changes on a second pass."""
        once = normalize("1.0-STABLE")
        twice = normalize(once)

        assert once == "1.0.0.0-stable"
        assert twice == "1.0.0.0"
        assert once != twice

    def test_main_branch_sentinel_reads_as_date_version(self) -> None:
        """Test the sentinel re-normalizes through the date grammar."""
        assert normalize("9999999-dev") == "9999999-dev"

    @pytest.mark.parametrize(
        "version",
        ["1.0", "1.0.0-beta2", "dev-foo", "2.1.x-dev", "2010.01.02"],
    )
    def test_common_versions_are_stable_under_renormalization(
        self, version: str
    ) -> None:
        """Test typical canonical versions normalize to themselves."""
        once = normalize(version)
        assert normalize(once) == once


@pytest.mark.unit
class TestNormalizeBranch:
    """Tests for normalize_branch."""

    @pytest.mark.parametrize(
        "branch, expected",
        [
            ("v1.x", "1.9999999.9999999.9999999-dev"),
            ("v1.*", "1.9999999.9999999.9999999-dev"),
            ("v1.0", "1.0.9999999.9999999-dev"),
            ("2.0", "2.0.9999999.9999999-dev"),
            ("v1.0.x", "1.0.9999999.9999999-dev"),
            ("v1.0.3.*", "1.0.3.9999999-dev"),
            ("v2.4.0", "2.4.0.9999999-dev"),
            ("2.4.4", "2.4.4.9999999-dev"),
            ("2.1.x", "2.1.9999999.9999999-dev"),
            ("2.1.X", "2.1.9999999.9999999-dev"),
            ("1", "1.9999999.9999999.9999999-dev"),
            ("1.2.3.4", "1.2.3.4-dev"),
        ],
    )
    def test_numeric_branches(self, branch: str, expected: str) -> None:
        """Test numeric branches become wildcard versions."""
        assert normalize_branch(branch) == expected

    @pytest.mark.parametrize("branch", ["master", "trunk", "default", " master "])
    def test_main_branches_delegate(self, branch: str) -> None:
        """Test main branch names use the main branch sentinel."""
        assert normalize_branch(branch) == "9999999-dev"

    @pytest.mark.parametrize(
        "branch, expected",
        [
            ("feature-a", "dev-feature-a"),
            ("FOOBAR", "dev-FOOBAR"),
            ("Master", "dev-Master"),
            ("1.0.0.0.0", "dev-1.0.0.0.0"),
            ("١.x", "dev-١.x"),
        ],
    )
    def test_other_branches(self, branch: str, expected: str) -> None:
        """Test other names become dev- branches verbatim."""
        assert normalize_branch(branch) == expected
