"""
Centralized constants for depgrammar.

This module defines immutable values used across depgrammar, including
grammar fragments, stability ranks, branch sentinels, CLI output formats
and logging formats. All values are intended to be treated as read-only.
"""

from typing import Final, Mapping, Sequence

# ---------------------------------------------------------------------------
# Stabilities
# ---------------------------------------------------------------------------

#: Stability names mapped to their rank. Lower ranks are more stable.
STABILITIES: Final[Mapping[str, int]] = {
    "stable": 0,
    "RC": 5,
    "beta": 10,
    "alpha": 15,
    "dev": 20,
}

#: Regex alternation of every stability name, used for ``@stability`` pins.
STABILITY_ALTERNATION: Final[str] = "|".join(STABILITIES)

# ---------------------------------------------------------------------------
# Grammar fragments
# ---------------------------------------------------------------------------

#: Trailing modifier grammar shared by the normalizer and tilde ranges.
#: Groups: stability word, stability number, dev marker.
MODIFIER_REGEX: Final[str] = (
    r"[._-]?(?:(stable|beta|b|RC|alpha|a|patch|pl|p)(?:[.-]?(\d+))?)?([.-]?dev)?"
)

# ---------------------------------------------------------------------------
# Sentinels
# ---------------------------------------------------------------------------

#: Canonical version of any main branch (master, trunk, default).
MAIN_BRANCH_VERSION: Final[str] = "9999999-dev"

#: Branch names treated as the main development line.
MAIN_BRANCH_NAMES: Final[Sequence[str]] = ("master", "trunk", "default")

#: Numeric stand-in for a wildcard segment of a branch version.
WILDCARD_SEGMENT: Final[str] = "9999999"

#: Prefix of arbitrary branch versions.
DEV_PREFIX: Final[str] = "dev-"

#: Constraint text that tracks the depending package's own version.
SELF_VERSION: Final[str] = "self.version"

# ---------------------------------------------------------------------------
# Links and sources
# ---------------------------------------------------------------------------

#: Link descriptions understood by resolvers consuming :class:`Link`.
SUPPORTED_LINK_TYPES: Final[Mapping[str, str]] = {
    "require": "requires",
    "conflict": "conflicts",
    "provide": "provides",
    "replace": "replaces",
    "require-dev": "requires (for development)",
}

#: Source types whose references are shown next to dev versions.
VCS_SOURCE_TYPES: Final[Sequence[str]] = ("hg", "git")

#: Length of a full SHA-1 source reference.
FULL_REFERENCE_LENGTH: Final[int] = 40

#: Length of a truncated source reference.
SHORT_REFERENCE_LENGTH: Final[int] = 7

# ---------------------------------------------------------------------------
# CLI configuration
# ---------------------------------------------------------------------------

#: Output formats accepted by the inspection commands.
OUTPUT_FORMATS: Final[Sequence[str]] = ("table", "simple", "json")

#: Default output format when neither config nor CLI selects one.
DEFAULT_OUTPUT_FORMAT: Final[str] = "table"

#: Default for stopping at the first invalid input.
DEFAULT_FAIL_FAST: Final[bool] = False

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
