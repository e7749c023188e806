"""Version and branch normalization.

Turns free-form version strings into a canonical, comparable form:

- classical versions are padded to four segments (``1.0`` -> ``1.0.0.0``);
- date versions keep their digits with ``-`` separators
  (``2010.01.02`` -> ``2010-01-02``);
- stability modifiers are expanded (``1.0b2`` -> ``1.0.0.0-beta2``);
- main branches collapse to ``9999999-dev`` and other branches to
  ``dev-<name>``;
- numeric branches become wildcard versions
  (``2.1.x-dev`` -> ``2.1.9999999.9999999-dev``).

Normalization is not idempotent: ``normalize("1.0-STABLE")`` is
``1.0.0.0-stable`` but normalizing that again yields ``1.0.0.0``.
"""

from __future__ import annotations

import re
from typing import Optional

from depgrammar.constants import (
    DEV_PREFIX,
    MAIN_BRANCH_NAMES,
    MAIN_BRANCH_VERSION,
    MODIFIER_REGEX,
    WILDCARD_SEGMENT,
)
from depgrammar.core.stability import expand_stability
from depgrammar.exceptions import InvalidVersionError
from depgrammar.utils.logger import get_logger

logger = get_logger("core.normalizer")

_ALIAS_RE = re.compile(r"^([^,\s]+) +as +([^,\s]+)$", re.ASCII)
_MAIN_BRANCH_RE = re.compile(
    r"^(?:dev-)?(?:" + "|".join(MAIN_BRANCH_NAMES) + r")$", re.IGNORECASE | re.ASCII
)
_CLASSICAL_RE = re.compile(
    r"^v?(\d{1,3})(\.\d+)?(\.\d+)?(\.\d+)?" + MODIFIER_REGEX + r"$",
    re.IGNORECASE | re.ASCII,
)
_DATE_RE = re.compile(
    r"^v?(\d{4}(?:[.:-]?\d{2}){1,6}(?:[.:-]?\d{1,3})?)" + MODIFIER_REGEX + r"$",
    re.IGNORECASE | re.ASCII,
)
_NON_DIGIT_RE = re.compile(r"\D", re.ASCII)
_DEV_SUFFIX_RE = re.compile(r"^(.*?)[.-]?dev$", re.IGNORECASE | re.ASCII)
_BRANCH_RE = re.compile(
    r"^v?(\d+)(\.(?:\d+|[x*]))?(\.(?:\d+|[x*]))?(\.(?:\d+|[x*]))?$",
    re.IGNORECASE | re.ASCII,
)
_WILDCARD_RE = re.compile(r"[x*]", re.IGNORECASE | re.ASCII)


def normalize(version: str, full_version: Optional[str] = None) -> str:
    """Normalize a version string to be able to perform comparisons on it.

    Args:
        version: Version or branch string, e.g. ``"v1.0"``, ``"2.0-RC1"``,
            ``"dev-master"`` or ``"1.0.x-dev"``.
        full_version: The complete string ``version`` was taken from, used
            to explain alias failures. Defaults to ``version``.

    Returns:
        The canonical version.

    Raises:
        InvalidVersionError: No version or branch grammar matched.

    Example::

        >>> normalize("1.0")
        '1.0.0.0'
        >>> normalize("1.0.0-beta2")
        '1.0.0.0-beta2'
        >>> normalize("dev-master")
        '9999999-dev'
    """
    version = version.strip()
    if full_version is None:
        full_version = version

    # Aliases are ignored: the alias source is what gets required
    match = _ALIAS_RE.match(version)
    if match:
        version = match.group(1)

    if _MAIN_BRANCH_RE.match(version):
        return MAIN_BRANCH_VERSION

    if version[:4].lower() == DEV_PREFIX:
        return DEV_PREFIX + version[4:]

    normalized: Optional[str] = None
    match = _CLASSICAL_RE.match(version)
    if match:
        normalized = (
            match.group(1)
            + (match.group(2) or ".0")
            + (match.group(3) or ".0")
            + (match.group(4) or ".0")
        )
        index = 5
    else:
        match = _DATE_RE.match(version)
        if match:
            normalized = _NON_DIGIT_RE.sub("-", match.group(1))
            index = 2

    if match is not None and normalized is not None:
        return _apply_modifiers(
            normalized,
            stability=match.group(index),
            number=match.group(index + 1),
            dev=match.group(index + 2),
        )

    match = _DEV_SUFFIX_RE.match(version)
    if match:
        try:
            return normalize_branch(match.group(1))
        except InvalidVersionError as exc:
            logger.debug("Branch normalization of %r failed: %s", version, exc)

    raise InvalidVersionError(
        f'Invalid version string "{version}"{_alias_hint(version, full_version)}',
        version=version,
        full_version=full_version,
    )


def normalize_branch(name: str) -> str:
    """Normalize a branch name to be able to perform comparisons on it.

    Numeric branches are turned into versions where every wildcard or
    missing segment is ``9999999``; any other name becomes ``dev-<name>``.

    Example::

        >>> normalize_branch("2.1.x")
        '2.1.9999999.9999999-dev'
        >>> normalize_branch("feature/foo")
        'dev-feature/foo'
    """
    name = name.strip()

    if name in MAIN_BRANCH_NAMES:
        return normalize(name)

    match = _BRANCH_RE.match(name)
    if match:
        version = "".join(
            _WILDCARD_RE.sub("x", group) if group is not None else ".x"
            for group in match.groups()
        )
        return version.replace("x", WILDCARD_SEGMENT) + "-dev"

    return DEV_PREFIX + name


def _apply_modifiers(
    version: str,
    *,
    stability: Optional[str],
    number: Optional[str],
    dev: Optional[str],
) -> str:
    """Append the expanded stability modifier and dev marker to a version."""
    if stability:
        # Only the exact lowercase word short-circuits
        if stability == "stable":
            return version
        version += "-" + expand_stability(stability) + (number or "")

    if dev:
        version += "-dev"

    return version


def _alias_hint(version: str, full_version: str) -> str:
    """Explain how ``version`` was misused inside an alias expression."""
    quoted = re.escape(version)
    if re.search(r" +as +" + quoted + r"$", full_version):
        return f' in "{full_version}", the alias must be an exact version'
    if re.search(r"^" + quoted + r" +as +", full_version):
        return (
            f' in "{full_version}", the alias source must be an exact version, '
            "if it is a branch name you should prefix it with dev-"
        )
    return ""
